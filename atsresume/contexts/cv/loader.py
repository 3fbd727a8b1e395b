"""
CV Loading

Turns a CV source (mapping, JSON text/bytes, or a JSON/YAML file) into a CV
record. Every structural problem surfaces as a DecodeError carrying its cause,
so callers only need to handle one error type.
"""

import json
from pathlib import Path
from typing import Any, Mapping, Union

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from atsresume.contexts.cv.cv_data_structure import CV
from atsresume.contexts.cv.exceptions import DecodeError, FieldTypeError, MissingFieldError

CVSource = Union[Mapping[str, Any], str, bytes]

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def decode_cv(source: CVSource) -> CV:
    """
    Decode a CV from a parsed mapping or from JSON text.

    Args:
        source: Mapping in the canonical keyed format, or JSON as str/bytes

    Returns:
        CV instance

    Raises:
        DecodeError: If the source is not valid JSON, its root is not a mapping,
            a required field is missing, or a field has the wrong type
    """
    if isinstance(source, (str, bytes)):
        try:
            data = json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError("CV source is not valid JSON", cause=e) from e
    else:
        data = source

    if not isinstance(data, Mapping):
        cause = FieldTypeError("<root>", "mapping", type(data).__name__)
        raise DecodeError("CV source must be a keyed record", cause=cause) from cause

    try:
        return CV.from_dict(data)
    except (MissingFieldError, FieldTypeError) as e:
        raise DecodeError("CV source does not match the CV schema", cause=e) from e


def load_cv(path: Union[str, Path]) -> CV:
    """
    Load a CV from a .json, .yaml or .yml file.

    YAML files are read with OmegaConf without resolving interpolations, so
    text such as "${...}" inside highlights is kept verbatim.

    Args:
        path: Path to CV file

    Returns:
        CV instance

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file suffix is not supported
        DecodeError: If the file content is malformed
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"CV file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return decode_cv(path.read_bytes())

    if suffix in YAML_SUFFIXES:
        try:
            yaml_data = OmegaConf.load(path)
            data = OmegaConf.to_container(yaml_data, resolve=False)
        except (OmegaConfBaseException, YAMLError) as e:
            raise DecodeError(f"CV file is not valid YAML: {path}", cause=e) from e
        return decode_cv(data)

    raise ValueError(
        f"Unsupported CV file type '{path.suffix}'. "
        f"Expected one of: {', '.join(JSON_SUFFIXES + YAML_SUFFIXES)}"
    )
