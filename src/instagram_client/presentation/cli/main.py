import json
from typing import Any

import typer

from instagram_client.config import settings
from instagram_client.domain.errors import InstagramError
from instagram_client.domain.mash import Mash
from instagram_client.factory import build_connection
from instagram_client.log import setup_logging

app = typer.Typer(help="Instagram API client")


def _pairs(values: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {item!r}")
        out[key] = value
    return out


def _echo(result: Any) -> None:
    if isinstance(result, str):
        typer.echo(result)
        return
    if isinstance(result, Mash):
        result = result.to_dict()
    elif isinstance(result, list):
        result = [r.to_dict() if isinstance(r, Mash) else r for r in result]
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


def _call(method: str, path: str, params: dict[str, str], body: dict[str, str] | None, raw: bool) -> None:
    setup_logging(settings.log_level)
    try:
        with build_connection(settings, raw=raw) as conn:
            result = conn.request(method, path, params=params, body=body)
    except InstagramError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _echo(result)


@app.command()
def get(
    path: str,
    param: list[str] = typer.Option([], "--param", "-p", help="Query parameter as key=value"),
    raw: bool = typer.Option(False, "--raw", help="Print the unparsed body"),
) -> None:
    _call("GET", path, _pairs(param), None, raw)


@app.command()
def post(
    path: str,
    data: list[str] = typer.Option([], "--data", "-d", help="Form field as key=value"),
    raw: bool = typer.Option(False, "--raw", help="Print the unparsed body"),
) -> None:
    _call("POST", path, {}, _pairs(data), raw)


@app.command()
def delete(
    path: str,
    param: list[str] = typer.Option([], "--param", "-p", help="Query parameter as key=value"),
) -> None:
    _call("DELETE", path, _pairs(param), None, False)


if __name__ == "__main__":
    app()
