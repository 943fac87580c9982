"""Template lifecycle event schemas (status, quality, components, category)."""

from wacloud.schemas.whatsapp.templates.base import (
    BaseTemplateValue,
    TemplateButtonType,
    TemplateCategory,
    TemplatePauseTitle,
    TemplateQualityScore,
    TemplateRejectionReason,
    TemplateStatusEvent,
)
from wacloud.schemas.whatsapp.templates.category_update import (
    TemplateCategoryCompletedValue,
    TemplateCategoryImpendingValue,
    TemplateCategoryUpdateValue,
    resolve_category_update,
)
from wacloud.schemas.whatsapp.templates.components_update import (
    TemplateButton,
    TemplateComponentsUpdateValue,
)
from wacloud.schemas.whatsapp.templates.quality_update import (
    TemplateQualityUpdateValue,
)
from wacloud.schemas.whatsapp.templates.status_update import (
    TemplateDisableInfo,
    TemplateOtherInfo,
    TemplateStatusUpdateValue,
)

__all__ = [
    "BaseTemplateValue",
    "TemplateButton",
    "TemplateButtonType",
    "TemplateCategory",
    "TemplateCategoryCompletedValue",
    "TemplateCategoryImpendingValue",
    "TemplateCategoryUpdateValue",
    "TemplateComponentsUpdateValue",
    "TemplateDisableInfo",
    "TemplateOtherInfo",
    "TemplatePauseTitle",
    "TemplateQualityScore",
    "TemplateQualityUpdateValue",
    "TemplateRejectionReason",
    "TemplateStatusEvent",
    "TemplateStatusUpdateValue",
    "resolve_category_update",
]
