"""
Template category update schema.

The platform sends two shapes under the same ``template_category_update``
field and no tag to tell them apart:

- impending: the category will change, carries ``correct_category``
- completed: the category has changed, carries ``previous_category``

``resolve_category_update`` tries the impending shape first and the completed
shape second. Each shape rejects the other's key, so a value carrying both
(or neither) matches nothing and fails with ``union_exhausted``.
"""

from typing import Annotated, Any, ClassVar

from pydantic import Field, PlainValidator, ValidationError, model_validator
from pydantic_core import PydanticCustomError

from wacloud.schemas.core.errors import UNION_EXHAUSTED_ERROR
from wacloud.schemas.whatsapp.templates.base import BaseTemplateValue, TemplateCategory


class _CategoryUpdateShape(BaseTemplateValue):
    shape_name: ClassVar[str]
    # Key that belongs to the other shape
    excluded_key: ClassVar[str]

    new_category: TemplateCategory = Field(..., description="Category after the change")

    @model_validator(mode="before")
    @classmethod
    def reject_other_shape(cls, data: Any) -> Any:
        if isinstance(data, dict) and cls.excluded_key in data:
            raise PydanticCustomError(
                "category_shape_conflict",
                "'{key}' is not allowed in the {shape} shape",
                {"key": cls.excluded_key, "shape": cls.shape_name},
            )
        return data


class TemplateCategoryImpendingValue(_CategoryUpdateShape):
    """Category change announced ahead of time."""

    shape_name: ClassVar[str] = "impending"
    excluded_key: ClassVar[str] = "previous_category"

    correct_category: TemplateCategory = Field(
        ..., description="Category the template will be moved to"
    )

    @property
    def is_impending(self) -> bool:
        return True


class TemplateCategoryCompletedValue(_CategoryUpdateShape):
    """Category change that already happened."""

    shape_name: ClassVar[str] = "completed"
    excluded_key: ClassVar[str] = "correct_category"

    previous_category: TemplateCategory = Field(
        ..., description="Category before the change"
    )

    @property
    def is_impending(self) -> bool:
        return False


# Resolution order matters: impending first, completed second
CATEGORY_UPDATE_SHAPES: tuple[type[_CategoryUpdateShape], ...] = (
    TemplateCategoryImpendingValue,
    TemplateCategoryCompletedValue,
)


def _summarize(exc: ValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(step) for step in error['loc']) or '<value>'}: {error['msg']}"
        for error in exc.errors(include_url=False)
    )


def resolve_category_update(
    value: Any,
) -> TemplateCategoryImpendingValue | TemplateCategoryCompletedValue:
    """
    Validate a category update value against each shape in order.

    Args:
        value: Raw ``value`` object of the change, or an already built shape

    Returns:
        The first shape that validates

    Raises:
        PydanticCustomError: ``union_exhausted`` naming both shapes and the
            reason each one failed
    """
    if isinstance(value, CATEGORY_UPDATE_SHAPES):
        return value

    failures: list[str] = []
    for shape in CATEGORY_UPDATE_SHAPES:
        try:
            return shape.model_validate(value)
        except ValidationError as exc:
            failures.append(f"{shape.shape_name} ({_summarize(exc)})")

    raise PydanticCustomError(
        UNION_EXHAUSTED_ERROR,
        "Value matches no template category update shape: {failures}",
        {
            "failures": "; ".join(failures),
            "attempted": [shape.shape_name for shape in CATEGORY_UPDATE_SHAPES],
        },
    )


TemplateCategoryUpdateValue = Annotated[
    TemplateCategoryImpendingValue | TemplateCategoryCompletedValue,
    PlainValidator(resolve_category_update),
]
