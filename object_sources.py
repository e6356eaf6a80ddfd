from __future__ import annotations

from typing import Any, Callable


SHORTHAND_METHOD = "shorthand-method"
CLOSURE_PROPERTY = "closure-property"
VARIANTS = (SHORTHAND_METHOD, CLOSURE_PROPERTY)

VARIANT_LABELS = {
    SHORTHAND_METHOD: "method shorthand",
    CLOSURE_PROPERTY: "closure property",
}

FACTORY_NAME = "build_objects"

SHORTHAND_ENTRY_SOURCE = """class ShorthandEntry:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def invoke(self):
        return self.value
"""

CLOSURE_ENTRY_SOURCE = """class ClosureEntry:
    __slots__ = ("value", "invoke")

    def __init__(self, value, invoke):
        self.value = value
        self.invoke = invoke
"""


class ShorthandEntry:
    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def invoke(self) -> int:
        return self.value


class ClosureEntry:
    __slots__ = ("value", "invoke")

    def __init__(self, value: int, invoke: Callable[[], int]) -> None:
        self.value = value
        self.invoke = invoke


def require_variant(variant: str) -> str:
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant: {variant!r} (expected one of {', '.join(VARIANTS)})")
    return variant


def variant_label(variant: str) -> str:
    return VARIANT_LABELS[require_variant(variant)]


def entry_expression(variant: str, index: int) -> str:
    if variant == SHORTHAND_METHOD:
        return f"ShorthandEntry({index})"
    return f"ClosureEntry({index}, lambda: {index})"


def generate_module_source(variant: str, object_count: int, trial_index: int) -> str:
    """Build the text of a module whose ``build_objects()`` returns ``object_count`` entries.

    Entry ``i`` carries ``value == i`` and an ``invoke()`` returning it. The
    trial index only appears in the leading comment.
    """
    require_variant(variant)
    if object_count <= 0:
        raise ValueError("object_count must be > 0")

    entry_source = SHORTHAND_ENTRY_SOURCE if variant == SHORTHAND_METHOD else CLOSURE_ENTRY_SOURCE
    entries = ",\n".join(f"        {entry_expression(variant, index)}" for index in range(object_count))
    body = f"    return [\n{entries},\n    ]\n"

    return (
        f"# {variant} trial {trial_index}\n"
        f"{entry_source}\n\n"
        f"def {FACTORY_NAME}():\n"
        f"{body}"
    )


def make_closure_entry(value: int) -> ClosureEntry:
    return ClosureEntry(value, lambda: value)


def build_pool(variant: str, object_count: int) -> list[Any]:
    require_variant(variant)
    if variant == SHORTHAND_METHOD:
        return [ShorthandEntry(index) for index in range(object_count)]
    return [make_closure_entry(index) for index in range(object_count)]
