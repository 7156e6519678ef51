"""
Command-line interface: load a dictionary, run one query, print its envelope.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from wnquery.api import WordNetService
from wnquery.core.constants import ENV_DICTIONARY_DIR
from wnquery.core.lexical import parse_pos
from wnquery.core.models import ServiceConfig
from wnquery.core.utils import setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)

DictDirOption = typer.Option(
    None,
    "--dict-dir",
    "-d",
    envvar=ENV_DICTIONARY_DIR,
    help="WordNet database directory (index.noun, data.noun, ...)",
)
PosOption = typer.Option(None, "--pos", "-p", help="POS code (1-5) or name (noun, verb, adj, adv, sat)")


def _pos_value(text: str) -> int:
    try:
        return parse_pos(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(envelope: str) -> None:
    typer.echo(envelope)
    if json.loads(envelope).get("error"):
        raise typer.Exit(code=1)


def _loaded_service(dict_dir: Optional[Path], strict_pos: bool) -> WordNetService:
    config = ServiceConfig.from_env()
    config.strict_pos = strict_pos or config.strict_pos
    service = WordNetService(config=config)
    result = service.load(str(dict_dir) if dict_dir else None)
    if json.loads(result).get("error"):
        _emit(result)
    return service


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    setup_logging("INFO" if verbose else ServiceConfig.from_env().log_level)


@app.command()
def load(dict_dir: Optional[Path] = DictDirOption) -> None:
    """Check that a dictionary directory loads."""
    service = WordNetService(config=ServiceConfig.from_env())
    _emit(service.load(str(dict_dir) if dict_dir else None))


@app.command()
def lookup(
    lemma: str = typer.Argument(...),
    pos: Optional[str] = PosOption,
    sense: Optional[int] = typer.Option(None, "--sense", "-s", help="1-based sense number (requires --pos)"),
    index: bool = typer.Option(False, "--index", help="Print the index entry instead of senses (requires --pos)"),
    strict_pos: bool = typer.Option(False, "--strict-pos", help="Reject unknown POS codes"),
    dict_dir: Optional[Path] = DictDirOption,
) -> None:
    """Sense entries of a lemma."""
    if (sense is not None or index) and pos is None:
        raise typer.BadParameter("--sense and --index require --pos")
    service = _loaded_service(dict_dir, strict_pos)
    if pos is None:
        _emit(service.lookup(lemma))
    elif index:
        _emit(service.lookup_index_with_pos(lemma, _pos_value(pos)))
    elif sense is not None:
        _emit(service.lookup_with_pos_and_sense(lemma, _pos_value(pos), sense))
    else:
        _emit(service.lookup_with_pos(lemma, _pos_value(pos)))


@app.command()
def synsets(
    lemma: str = typer.Argument(...),
    pos: Optional[str] = PosOption,
    strict_pos: bool = typer.Option(False, "--strict-pos", help="Reject unknown POS codes"),
    dict_dir: Optional[Path] = DictDirOption,
) -> None:
    """Synsets reached by the senses of a lemma."""
    service = _loaded_service(dict_dir, strict_pos)
    if pos is None:
        _emit(service.get_synsets_with_lemma(lemma))
    else:
        _emit(service.get_synsets_with_lemma_and_pos(lemma, _pos_value(pos)))


@app.command()
def synset(
    pos: str = typer.Argument(..., help="POS code or name"),
    offset: int = typer.Argument(...),
    dict_dir: Optional[Path] = DictDirOption,
) -> None:
    """A synset by part of speech and offset."""
    service = _loaded_service(dict_dir, False)
    _emit(service.get_synset(_pos_value(pos), offset))


@app.command()
def morph(
    word: str = typer.Argument(...),
    dict_dir: Optional[Path] = DictDirOption,
) -> None:
    """Base forms of an inflected word, by part of speech."""
    service = _loaded_service(dict_dir, False)
    _emit(service.morph(word))


if __name__ == "__main__":
    app()
