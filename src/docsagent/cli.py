"""CLI entrypoints for docsagent."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from docsagent.api.serve import main as serve_main
from docsagent.config import load_settings
from docsagent.errors import DocsAgentError
from docsagent.logging import configure_logging, get_logger, log_exception
from docsagent.service import DocumentService, GenerateRequest

app = typer.Typer(add_completion=False, help="docsagent structured document generation CLI")
logger = get_logger(__name__)


@app.command()
def generate(
    prompt: str = typer.Argument(
        "",
        help="What the document should be about. "
        "If omitted, you must provide --prompt-file pointing to a UTF-8 text file.",
        show_default=False,
    ),
    doc_type: str = typer.Option("general", "--doc-type", "-t", help="Document type, e.g. report or resume"),
    mode: str = typer.Option("auto", "--mode", "-m", help="auto, single or iterative"),
    output: Path = typer.Option(Path("document.json"), "--output", "-o", help="Output JSON file"),
    prompt_file: Path | None = typer.Option(
        None,
        "--prompt-file",
        help="Path to a UTF-8 text file containing the prompt",
    ),
) -> None:
    """Generate a document and write the JSON response."""

    if mode not in ("auto", "single", "iterative"):
        raise typer.BadParameter("--mode must be one of: auto, single, iterative")
    if not prompt:
        if prompt_file is None:
            raise typer.BadParameter("You must provide either a positional PROMPT or --prompt-file.")
        prompt = prompt_file.read_text(encoding="utf-8").strip()
        if not prompt:
            raise typer.BadParameter("The prompt file is empty.")

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("CLI generate requested")

    # Jobs do not outlive the process, so auto resolves to batch iterative here.
    service = DocumentService.from_settings(settings)
    request = GenerateRequest(prompt=prompt, doc_type=doc_type, mode=mode)  # type: ignore[arg-type]
    if service.resolve_mode(request) == "iterative_job":
        request.mode = "iterative"

    try:
        result = asyncio.run(service.generate(request))
    except DocsAgentError as exc:
        log_exception(logger, "Generation failed", doc_type=doc_type, mode=request.mode)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2), encoding="utf-8")
    typer.echo(str(output))


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload (dev)"),
) -> None:
    """Start the API server."""

    serve_main(host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
