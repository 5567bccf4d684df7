import pydantic
import pydantic_core

__all__ = ("convert_errors", "format_errors")


RULE_KINDS = ("minLength", "upperLowerCase", "digit", "specialCharacter")

CUSTOM_TYPES = {
    "dict_type": "mapping_type",
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "list_type": "sequence_type",
    "tuple_type": "sequence_type",
    "union_tag_invalid": "enum_value_out_of_range",
    "union_tag_not_found": "missing",
    "extra_forbidden": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "enum_value_out_of_range": (
        "Input must be set to one of the following values: {expected_tags}"
    ),
    "mapping_type": "Input must be a valid mapping",
    "sequence_type": "Input must be a valid sequence",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []

    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        # 'loc': ('rules', 0, 'minLength', 'threshold') => ('rules', 0, 'threshold')
        if len(error["loc"]) > 2 and error["loc"][2] in RULE_KINDS:
            error["loc"] = (*error["loc"][:2], *error["loc"][3:])

        # 'loc': ('rules', 0) => ('rules', 0, 'kind')
        if error["type"] in ("union_tag_not_found", "union_tag_invalid") and ctx:
            error["loc"] += (ctx["discriminator"].replace("'", ""),)

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type

        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message

        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        new_errors.append(error)

    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    """
    Example::

        rules -> 0 -> threshold: Input must be greater than or equal to 0
    """
    return "\n".join(
        "%s: %s" % (" -> ".join(str(part) for part in error["loc"]), error["msg"])
        for error in errors
    )
