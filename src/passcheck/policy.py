import logging
import pathlib
from collections.abc import Mapping
from typing import Any

import ruamel.yaml as yaml
from pydantic import ValidationError
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from .checker import Checker
from .dto import PasswordPolicyDTO
from .exc import Location, PolicySyntaxError, PolicyValidationError
from .util.model import convert_errors, format_errors

__all__ = ("load_policy", "read_document", "read_policy", "load_checker")


logger = logging.getLogger(__name__)
loader = yaml.YAML(typ="safe")


def load_policy(data: Mapping[str, Any] | None) -> PasswordPolicyDTO:
    """
    Validates a policy mapping.

    An empty document (``None``) yields the default policy.

    Raises:
        PolicyValidationError: The mapping does not match the policy schema.
    """
    try:
        policy = PasswordPolicyDTO.model_validate(data if data is not None else {})
    except ValidationError as ex:
        raise PolicyValidationError(format_errors(convert_errors(ex)), ctx=None) from ex

    logger.debug("loaded policy with %d rule(s)", len(policy.rules))
    return policy


def read_document(fn: pathlib.Path) -> Any:
    """
    Decodes a YAML file without validating it.

    Raises:
        PolicySyntaxError: The file is not valid YAML.
    """
    logger.debug("reading policy file %r", str(fn))

    try:
        payload = loader.load(fn.read_bytes())
    except YAMLError as ex:
        loc = Location(filename=fn)
        if isinstance(ex, MarkedYAMLError) and ex.problem_mark is not None:
            loc["line"] = ex.problem_mark.line + 1
            loc["col"] = ex.problem_mark.column + 1
        raise PolicySyntaxError(str(ex), ctx=PolicySyntaxError.Context(loc=loc)) from ex

    return payload


def read_policy(fn: pathlib.Path) -> PasswordPolicyDTO:
    """
    Decodes a YAML policy file and validates its content.

    Raises:
        PolicySyntaxError: The file is not valid YAML.
        PolicyValidationError: The document does not match the policy schema.
    """
    return load_policy(read_document(fn))


def load_checker(data: Mapping[str, Any] | None) -> Checker:
    return load_policy(data).build_checker()
