#!/usr/bin/env python3
# u8tbl/interface/parser.py
from __future__ import annotations

"""
Argument parsing helpers for the command line.

Responsibilities:
- Bind argv tokens to a callable signature with type coercion based on annotations.
- Render compact Usage strings from a function signature.
"""

import inspect
from typing import Any, Union, get_args, get_origin


def _unwrap_optional(annotation: Any) -> Any:
    """`X | None` / `Optional[X]` -> X; anything else unchanged."""
    args = get_args(annotation)
    if get_origin(annotation) is Union or type(annotation).__name__ == "UnionType":
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            return non_none[0]
    return annotation


def _coerce_value(text_value: str, annotation: Any) -> Any:
    """
    Convert a string to the annotated type when reasonable.

    Supported coercions:
        - str/Any/inspect._empty -> original text
        - bool -> accepts '1,true,yes,y,on' (case-insensitive)
        - int/float -> cast via constructor (ValueError on bad input)
    """
    annotation = _unwrap_optional(annotation)
    if annotation in (inspect.Parameter.empty, str, Any):
        return text_value
    if annotation is bool:
        return text_value.lower() in ("1", "true", "yes", "y", "on")
    if annotation in (int, float):
        return annotation(text_value)
    return text_value


def bind_args(func: Any, tokens: list[str]) -> tuple[tuple[Any, ...], dict[str, Any]]:
    """
    Bind a flat token list to the signature of `func`.

    Supports:
        - positional tokens
        - key=value tokens for keyword-only or normal parameters

    Raises TypeError on missing, unknown or surplus arguments.
    """
    signature = inspect.signature(func, eval_str=True)
    parameters = list(signature.parameters.values())
    known = {p.name for p in parameters}

    positional_tokens: list[str] = []
    kw_tokens_raw: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if sep and key in known:
            kw_tokens_raw[key] = value
        elif sep and key.isidentifier():
            raise TypeError(f"Unknown option: {key}")
        else:
            positional_tokens.append(token)

    bound_positional: list[Any] = []
    bound_keywords: dict[str, Any] = {}
    positional_index = 0
    # once a parameter is given as key=value, later ones must be passed by keyword too
    by_keyword = False

    for parameter in parameters:
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            if parameter.name in kw_tokens_raw:
                value = _coerce_value(kw_tokens_raw[parameter.name], parameter.annotation)
                by_keyword = parameter.kind is parameter.POSITIONAL_OR_KEYWORD
            elif positional_index < len(positional_tokens):
                value = _coerce_value(
                    positional_tokens[positional_index], parameter.annotation)
                positional_index += 1
            elif parameter.default is not inspect.Parameter.empty:
                if by_keyword:
                    continue
                value = parameter.default
            else:
                raise TypeError(f"Missing required argument: {parameter.name}")

            if by_keyword:
                bound_keywords[parameter.name] = value
            else:
                bound_positional.append(value)
        elif parameter.kind is parameter.KEYWORD_ONLY:
            if parameter.name in kw_tokens_raw:
                bound_keywords[parameter.name] = _coerce_value(
                    kw_tokens_raw[parameter.name], parameter.annotation)
            elif parameter.default is inspect.Parameter.empty:
                raise TypeError(
                    f"Missing required keyword-only argument: {parameter.name}")

    if positional_index < len(positional_tokens):
        raise TypeError("Too many positional arguments.")

    return tuple(bound_positional), bound_keywords


def build_usage(command_name: str, func: Any) -> str:
    """
    Render a compact usage string based on `func` signature.

    Examples:
        'u8tbl [delimiter] [style=...] [log_level=...]'
    """
    signature = inspect.signature(func)
    usage_parts: list[str] = []

    for parameter in signature.parameters.values():
        token = f"<{parameter.name}>" if parameter.default is inspect.Parameter.empty else f"[{parameter.name}]"
        if parameter.kind is parameter.KEYWORD_ONLY:
            token = f"[{parameter.name}=...]"
        usage_parts.append(token)

    return f"{command_name} " + " ".join(usage_parts) if usage_parts else command_name
