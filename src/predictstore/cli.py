"""PredictStore command line interface.

Commands:
  store         - Store (overwrite) a prediction document
  get           - Fetch a prediction document
  delete        - Delete a prediction document
  check-config  - Validate the service account configuration
  serve         - Run the HTTP API
"""

import asyncio
from collections.abc import Awaitable, Callable
import json
import sys
from typing import Any

from rich.console import Console
import typer

from predictstore.core.config import get_settings
from predictstore.core.container import create_prediction_store
from predictstore.core.exceptions import PredictStoreError
from predictstore.core.logging_config import setup_logging
from predictstore.models.result import StoreResult
from predictstore.ports.storage import PredictionStoragePort
from predictstore.services.gcp_credentials import load_credential_from_settings

app = typer.Typer(
    name="predictstore",
    help="Manage prediction documents in Firestore",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
err_console = Console(stderr=True)


def _open_store() -> PredictionStoragePort:
    settings = get_settings()
    setup_logging(settings)
    try:
        return create_prediction_store(settings)
    except PredictStoreError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(code=1) from e


async def _run_with_store(
    store: PredictionStoragePort,
    operation: Callable[[PredictionStoragePort], Awaitable[StoreResult]],
) -> StoreResult:
    try:
        return await operation(store)
    finally:
        await store.close()


def _execute(operation: Callable[[PredictionStoragePort], Awaitable[StoreResult]]) -> None:
    store = _open_store()
    result = asyncio.run(_run_with_store(store, operation))
    console.print_json(json.dumps(result.to_dict(), default=str))
    if not result.success:
        raise typer.Exit(code=1)


def _parse_payload(raw: str) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise typer.BadParameter("payload must be a JSON object")
    return payload


@app.command()
def store(
    prediction_id: str = typer.Argument(..., help="Document ID"),
    data: str = typer.Option(..., "--data", "-d", help="Document payload as a JSON object"),
):
    """Store a prediction, replacing any existing document"""
    payload = _parse_payload(data)
    _execute(lambda s: s.store_data(prediction_id, payload))


@app.command()
def get(prediction_id: str = typer.Argument(..., help="Document ID")):
    """Fetch a prediction document"""
    _execute(lambda s: s.get_data(prediction_id))


@app.command()
def delete(prediction_id: str = typer.Argument(..., help="Document ID")):
    """Delete a prediction document"""
    _execute(lambda s: s.delete_data(prediction_id))


@app.command("check-config")
def check_config():
    """Validate SERVICE_ACCOUNT_KEY without contacting Firestore"""
    try:
        credential = load_credential_from_settings(get_settings())
    except PredictStoreError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(code=1) from e

    console.print(
        f"Service account OK: project={credential.project_id} "
        f"client_email={credential.client_email}",
        style="green",
    )


@app.command()
def serve():
    """Run the HTTP API"""
    from predictstore.main import run  # noqa: PLC0415

    run()


def main():
    """Main CLI entry point"""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("Interrupted by user", style="yellow")
        sys.exit(130)


if __name__ == "__main__":
    main()
