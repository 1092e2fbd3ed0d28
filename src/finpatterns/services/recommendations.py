"""RecommendationService: goal-specific savings advice."""

from __future__ import annotations

from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.recommendations import creator_for_goal
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult


class RecommendationService(BaseService):
    def recommend(self, goal_type: str) -> ServiceResult:
        """Generate the recommendation for a goal-type discriminator."""
        try:
            creator = creator_for_goal(goal_type)
        except UnknownVariantError as exc:
            return self._failure("recommend", exc)
        return ServiceResult(
            ok=True,
            op="recommend",
            data={
                "goal_type": goal_type,
                "recommendation": creator.generate_recommendation(),
            },
        )
