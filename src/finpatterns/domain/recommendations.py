"""Goal recommendations produced through factory-method creators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ClassVar

from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.types import GoalType


class Recommendation(ABC):
    """Savings advice for one kind of financial goal."""

    name: ClassVar[str]
    amount: ClassVar[Decimal]

    @abstractmethod
    def get_recommendation_details(self) -> str: ...


class TravelRecommendation(Recommendation):
    name = "Travel Recommendation"
    amount = Decimal("500")

    def get_recommendation_details(self) -> str:
        return f"Save ${self.amount} per month to achieve your travel goal."


class CarRecommendation(Recommendation):
    name = "Car Recommendation"
    amount = Decimal("300")

    def get_recommendation_details(self) -> str:
        return f"Save ${self.amount} per month or explore auto loan options."


class HomeRecommendation(Recommendation):
    name = "Home Recommendation"
    amount = Decimal("100000")

    def get_recommendation_details(self) -> str:
        return f"Consider a mortgage plan for your ${self.amount:,} goal."


class RecommendationCreator(ABC):
    @abstractmethod
    def create_recommendation(self) -> Recommendation:
        """Instantiate the concrete recommendation for this creator."""
        ...

    def generate_recommendation(self) -> str:
        """Create a recommendation and prefix its details with its name."""
        recommendation = self.create_recommendation()
        return f"{recommendation.name}: {recommendation.get_recommendation_details()}"


class TravelRecommendationCreator(RecommendationCreator):
    def create_recommendation(self) -> Recommendation:
        return TravelRecommendation()


class CarRecommendationCreator(RecommendationCreator):
    def create_recommendation(self) -> Recommendation:
        return CarRecommendation()


class HomeRecommendationCreator(RecommendationCreator):
    def create_recommendation(self) -> Recommendation:
        return HomeRecommendation()


RECOMMENDATION_CREATORS: dict[str, type[RecommendationCreator]] = {
    GoalType.TRAVEL: TravelRecommendationCreator,
    GoalType.CAR: CarRecommendationCreator,
    GoalType.HOME: HomeRecommendationCreator,
}


def creator_for_goal(goal_type: str) -> RecommendationCreator:
    """Select the recommendation creator for a goal-type discriminator.

    Raises:
        UnknownVariantError: If *goal_type* is not registered.
    """
    creator_cls = RECOMMENDATION_CREATORS.get(goal_type)
    if creator_cls is None:
        raise UnknownVariantError("goal type", goal_type, RECOMMENDATION_CREATORS)
    return creator_cls()
