"""Working set model.

A working set is a named, user-defined collection of resource paths
that can be used as the root source of a search scope.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkingSet(BaseModel):
    """Named collection of resource paths.

    Attributes:
        label: Display label, also used for sorting and selection.
        elements: Resource path strings (e.g., "/proj/src").
        aggregate: True for aggregate working sets. An empty aggregate
            working set stands for the whole workspace.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: Annotated[str, Field(min_length=1, description="Working set label")]
    elements: Annotated[
        list[str],
        Field(default_factory=list, description="Resource paths in the working set"),
    ]
    aggregate: Annotated[bool, Field(description="Aggregate working set")] = False

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        """Reject labels that are blank after stripping."""
        label = v.strip()
        if not label:
            msg = "Working set label cannot be blank"
            raise ValueError(msg)
        return label

    @property
    def is_empty(self) -> bool:
        return not self.elements
