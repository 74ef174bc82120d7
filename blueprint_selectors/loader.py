"""Load selector documents and blueprints from YAML or JSON text."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, NamedTuple

import yaml

from .const import CONF_BLUEPRINT, CONF_INPUT, CONF_SELECTOR, INPUT_TAG
from .exceptions import (
    DocumentLoadError,
    EmptyDocumentError,
    SelectorError,
    TypeMismatchError,
)
from .selector import Selector
from .validation import collect_errors, validate_document

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Input:
    """Reference to a blueprint input, written as ``!input name``."""

    name: str


class BlueprintInput(NamedTuple):
    """A blueprint input that declares a selector."""

    name: str
    path: tuple[str, ...]
    selector: Any


class _SelectorLoader(yaml.SafeLoader):
    """Safe loader that understands the blueprint ``!input`` tag."""


def _construct_input(loader: yaml.SafeLoader, node: yaml.Node) -> Input:
    return Input(loader.construct_scalar(node))


_SelectorLoader.add_constructor(INPUT_TAG, _construct_input)


def load_document(text: str) -> Any:
    """Parse YAML (or JSON) text into plain Python data.

    Text that looks like a JSON object or array is tried with :mod:`json`
    first, since YAML does not allow the tab indentation JSON permits.
    Anything JSON rejects goes through the YAML loader, so YAML flow
    mappings such as ``{number: {min: 0, max: 10}}`` still load.
    """

    if text.lstrip().startswith(("{", "[")):
        try:
            return json.loads(text)
        except ValueError:
            _LOGGER.debug("Document is not JSON, parsing it as YAML")

    try:
        return yaml.load(text, Loader=_SelectorLoader)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        location = f"line {mark.line + 1}, column {mark.column + 1}" if mark else None
        raise DocumentLoadError(
            f"Unable to parse document: {' '.join(str(exc).split())}",
            translation_placeholders={"location": location or ""},
        ) from exc


def load_selector(text: str) -> Selector:
    """Parse and validate a single selector document."""

    return validate_document(load_document(text))


def load_document_file(path: str | Path) -> Any:
    """Read and parse a UTF-8 encoded YAML or JSON file.

    ``OSError`` from reading the file propagates; undecodable bytes are
    reported as :class:`DocumentLoadError`.
    """

    path = Path(path)
    _LOGGER.debug("Loading document from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(
            f"Unable to decode document as UTF-8: {exc.reason}",
            translation_placeholders={"location": f"byte {exc.start}"},
        ) from exc
    return load_document(text)


def load_selector_file(path: str | Path) -> Selector:
    """Read, parse and validate a selector document from disk."""

    return validate_document(load_document_file(path))


def _iter_inputs(
    inputs: Any, path: tuple[str, ...], prefix: tuple[str, ...]
) -> Iterator[BlueprintInput]:
    if not isinstance(inputs, dict):
        raise TypeMismatchError(
            "Blueprint inputs must be a mapping", path=path, expected="a mapping"
        )

    for name, definition in inputs.items():
        name = str(name)
        if not isinstance(definition, dict):
            # Inputs without options take no selector
            continue
        if CONF_INPUT in definition:
            # Input section grouping further inputs
            yield from _iter_inputs(
                definition[CONF_INPUT], (*path, name, CONF_INPUT), (*prefix, name)
            )
            continue
        if CONF_SELECTOR not in definition:
            continue
        yield BlueprintInput(
            name=".".join((*prefix, name)),
            path=(*path, name, CONF_SELECTOR),
            selector=definition[CONF_SELECTOR],
        )


def iter_blueprint_selectors(document: Any) -> Iterator[BlueprintInput]:
    """Yield every blueprint input that declares a selector."""

    if not isinstance(document, dict) or CONF_BLUEPRINT not in document:
        raise EmptyDocumentError(
            "Document has no blueprint section", expected=f"a '{CONF_BLUEPRINT}' key"
        )

    blueprint = document[CONF_BLUEPRINT]
    if not isinstance(blueprint, dict):
        raise TypeMismatchError(
            "Blueprint section must be a mapping",
            path=(CONF_BLUEPRINT,),
            expected="a mapping",
        )

    inputs = blueprint.get(CONF_INPUT)
    if inputs is None:
        return
    yield from _iter_inputs(inputs, (CONF_BLUEPRINT, CONF_INPUT), ())


def validate_blueprint(document: Any) -> dict[str, list[SelectorError]]:
    """Check every input selector of a blueprint.

    Returns the problems keyed by input name; inputs without problems are
    left out, so an empty mapping means the blueprint is valid.
    """

    problems: dict[str, list[SelectorError]] = {}
    for blueprint_input in iter_blueprint_selectors(document):
        errors = collect_errors(blueprint_input.selector, blueprint_input.path)
        if errors:
            _LOGGER.warning(
                "Blueprint input %s has an invalid selector: %s",
                blueprint_input.name,
                errors[0],
            )
            problems[blueprint_input.name] = errors
    return problems
