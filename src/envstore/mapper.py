from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, get_args, get_origin, get_type_hints

from envstore.convert import Int64, Kind, Uint, Uint64, zero_value
from envstore.store import EnvStore
from envstore.utils.logger import get_logger

logger = get_logger(__name__)

ALIAS_METADATA_KEY = "env"


@dataclass(frozen=True)
class FieldBinding:
    name: str
    key: str
    kind: Optional[Kind]  # None marks an unsupported field type


def kind_for(hint: Any) -> Optional[Kind]:
    if hint is str:
        return Kind.STRING
    if hint is bool:
        return Kind.BOOL
    if hint is int or hint is Int64:
        return Kind.INT
    if hint is Uint or hint is Uint64:
        return Kind.UINT
    if hint is float:
        return Kind.FLOAT
    if get_origin(hint) is list and get_args(hint) == (str,):
        return Kind.STRINGS
    return None


def _field_hints(cls: type) -> Dict[str, Any]:
    try:
        return get_type_hints(cls)
    except NameError:
        pass
    # resolve one annotation at a time; unresolvable ones stay unbound
    module_globals = vars(sys.modules[cls.__module__]) if cls.__module__ in sys.modules else {}
    hints: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not isinstance(f.type, str):
            hints[f.name] = f.type
            continue
        try:
            hints[f.name] = eval(f.type, module_globals, dict(vars(cls)))
        except (NameError, AttributeError, SyntaxError):
            hints[f.name] = None
    return hints


def bindings_for(cls: type) -> List[FieldBinding]:
    """Build the binding table of a dataclass, in field declaration order.

    The lookup key is the ``env`` entry of the field's metadata when present,
    otherwise the field name. Fields starting with ``_`` are not bound.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"expected a dataclass type, got {cls!r}")
    hints = _field_hints(cls)
    bindings: List[FieldBinding] = []
    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            continue
        key = f.metadata.get(ALIAS_METADATA_KEY) or f.name
        bindings.append(FieldBinding(name=f.name, key=key, kind=kind_for(hints.get(f.name))))
    return bindings


def map_record(
    target: Any,
    store: EnvStore,
    bindings: Optional[Sequence[FieldBinding]] = None,
) -> None:
    """Assign stored values onto the fields of the dataclass instance ``target``.

    Fields with an unsupported type, and fields whose key is not in ``store``,
    keep their current value. Values that fail to convert become the zero
    value of the field type. Anything other than a mutable dataclass instance
    raises ``TypeError``.
    """
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        raise TypeError(f"map_record expects a dataclass instance, got {type(target).__name__}")
    if type(target).__dataclass_params__.frozen:
        raise TypeError(f"cannot map onto frozen dataclass {type(target).__name__}")

    for binding in bindings if bindings is not None else bindings_for(type(target)):
        if binding.kind is None:
            logger.debug("field_skipped", field=binding.name, reason="unsupported_type")
            continue
        current = getattr(target, binding.name, zero_value(binding.kind))
        setattr(target, binding.name, store.lookup(binding.key, binding.kind, current))
