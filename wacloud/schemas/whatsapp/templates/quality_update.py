"""Template quality score update schema."""

from pydantic import Field

from wacloud.schemas.whatsapp.templates.base import (
    BaseTemplateValue,
    TemplateQualityScore,
)

# Order used to tell upgrades from downgrades; UNKNOWN is not ranked
_QUALITY_RANK = {
    TemplateQualityScore.RED: 0,
    TemplateQualityScore.YELLOW: 1,
    TemplateQualityScore.GREEN: 2,
}


class TemplateQualityUpdateValue(BaseTemplateValue):
    """Before/after quality score pair for a template."""

    previous_quality_score: TemplateQualityScore = Field(
        ..., description="Quality score before the change"
    )
    new_quality_score: TemplateQualityScore = Field(
        ..., description="Quality score after the change"
    )

    @property
    def is_downgrade(self) -> bool:
        before = _QUALITY_RANK.get(self.previous_quality_score)
        after = _QUALITY_RANK.get(self.new_quality_score)
        return before is not None and after is not None and after < before
