"""Extraction of API groups from service options."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from mini_service_utils.errors import GroupDefinitionError, NoGroupsDefinedError


class ApiGroup(BaseModel):
    """Expected schema for exposed API groups.

    Extra keys are group options and are kept as-is.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    name: str = Field(min_length=1, description="Group name")
    init: Callable[..., Any] = Field(description="Initialiser returning the APIs")


GROUP_SCHEMA = ApiGroup

_GROUPS_ADAPTER: TypeAdapter[list[ApiGroup]] = TypeAdapter(list[ApiGroup])


@dataclass
class GroupSet:
    """Extracted API groups with their options.

    Attributes:
        groups: API groups, as supplied by the caller
        group_opts: Group options keyed by group name

    """

    groups: Sequence[Any]
    group_opts: Mapping[str, Any] = field(default_factory=dict)


def is_group(value: Any) -> bool:  # noqa: ANN401
    """Check if a value is a valid API group."""
    try:
        ApiGroup.model_validate(value)
    except ValidationError:
        return False
    return True


def extract_groups(opts: Any) -> GroupSet:  # noqa: ANN401
    """Extract API groups and group options from service options.

    The options can be a group themselves (a ``name`` and an ``init``, mixed
    with the group options), or list groups under ``groups``, with their
    options under ``groupOpts``.

    Args:
        opts: Analysed service options

    Returns:
        Extracted groups

    Raises:
        GroupDefinitionError: If an item of ``groups`` isn't a valid group
        NoGroupsDefinedError: If options define neither a group nor groups

    """
    if is_group(opts):
        # APIs are contained in the opts themselves
        name = opts["name"] if isinstance(opts, Mapping) else opts.name
        return GroupSet(groups=[opts], group_opts={name: opts})

    groups = opts.get("groups") if isinstance(opts, Mapping) else None
    if isinstance(groups, list | tuple):
        # APIs are grouped
        try:
            _GROUPS_ADAPTER.validate_python(groups)
        except ValidationError as e:
            first = e.errors()[0]
            position = first["loc"][0]
            path = ".".join(str(part) for part in first["loc"][1:])
            reason = f"{path}: {first['msg']}" if path else first["msg"]
            raise GroupDefinitionError(
                f"Group definition at position {position}: {reason}",
                position=int(position),
            ) from e
        group_opts = opts.get("groupOpts", opts.get("group_opts")) or {}
        return GroupSet(groups=groups, group_opts=group_opts)

    raise NoGroupsDefinedError("No APIs nor API groups defined")


def is_api(apis: Any) -> bool:  # noqa: ANN401
    """Check if exposed APIs are acceptable for further processing.

    Mappings and object instances are accepted; None, scalars, strings,
    sequences, functions and classes are not.
    """
    if apis is None or isinstance(
        apis, str | bytes | int | float | bool | list | tuple | set | frozenset
    ):
        return False
    return not (inspect.isroutine(apis) or inspect.isclass(apis))


def extract_validate(
    api_id: str,
    apis: Any,  # noqa: ANN401
    opts: Mapping[str, Any] | None = None,
    clause: str = "validate",
) -> Any:  # noqa: ANN401
    """Find the validation schema for a given API.

    The schema is searched on the API function itself (as an attribute named
    after the clause), then in the group options.

    Args:
        api_id: Name of the exposed API
        apis: Exposed API functions, as a mapping or an object holding them
        opts: Group options that may hold the clause
        clause: Name of the searched clause

    Returns:
        The schema found, or None

    """
    api = apis[api_id] if isinstance(apis, Mapping) else getattr(apis, api_id)
    return getattr(api, clause, None) or (opts or {}).get(clause) or None
