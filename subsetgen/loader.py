"""YAML loader + schema validation for problem files.

Provides a single entrypoint to parse a YAML string, validate it against the
packaged JSON schema, and return a canonical dictionary, plus helpers that turn
that dictionary into a solver-ready problem instance.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from subsetgen.problems import SetCoverProblem, SubsetSumProblem

Problem = Union[SetCoverProblem, SubsetSumProblem]


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("subsetgen.schemas")
            .joinpath("problem.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged problem schema 'subsetgen/schemas/problem.json'."
        ) from exc


def load_problem_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a problem YAML string.

    Raises:
        ValueError: If the document is not a mapping.
        jsonschema.ValidationError: If the mapping does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())
    return data


def problem_from_dict(data: Dict[str, Any]) -> Problem:
    """Build a problem instance from a validated dictionary."""
    kind = data.get("kind")
    if kind == "set_cover":
        return SetCoverProblem(
            universe=data["universe"],
            families=[list(family) for family in data["families"]],
        )
    if kind == "subset_sum":
        return SubsetSumProblem(values=list(data["values"]), target=data["target"])
    raise ValueError(f"Unknown problem kind: {kind!r}")


def load_problem(path: Path) -> Problem:
    """Read, validate and build the problem stored at ``path``."""
    return problem_from_dict(load_problem_yaml(Path(path).read_text()))
