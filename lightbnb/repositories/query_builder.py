"""
Property search statement builder.

Each optional search option becomes one FilterPredicate tagged with the stage
it applies to. WHERE-stage predicates filter rows before reviews are grouped;
HAVING-stage predicates filter on the aggregated rating afterwards. The builder
folds the predicates into a single SELECT with bound parameters.
"""

from sqlalchemy import Select, and_, func, select
from sqlalchemy.sql.elements import ColumnElement
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchOptions
from dataclasses import dataclass
from typing import Any, Callable, List, Optional
import enum
import logging

logger = logging.getLogger(__name__)

average_rating = func.avg(PropertyReview.rating)


class FilterStage(str, enum.Enum):
    """Where a predicate is applied relative to GROUP BY."""
    WHERE = "where"
    HAVING = "having"


@dataclass(frozen=True)
class FilterPredicate:
    """One search condition together with the value it binds."""
    name: str
    stage: FilterStage
    clause: ColumnElement
    value: Any


def dollars_to_cents(amount: float) -> int:
    return int(round(amount * 100))


def _city_predicate(options: PropertySearchOptions) -> Optional[FilterPredicate]:
    if options.city is None:
        return None
    return FilterPredicate("city", FilterStage.WHERE, Property.city.like(options.city), options.city)


def _owner_predicate(options: PropertySearchOptions) -> Optional[FilterPredicate]:
    if options.owner_id is None:
        return None
    return FilterPredicate("owner_id", FilterStage.WHERE, Property.owner_id == options.owner_id, options.owner_id)


def _minimum_price_predicate(options: PropertySearchOptions) -> Optional[FilterPredicate]:
    if options.minimum_price_per_night is None:
        return None
    cents = dollars_to_cents(options.minimum_price_per_night)
    return FilterPredicate("minimum_price_per_night", FilterStage.WHERE, Property.cost_per_night >= cents, cents)


def _maximum_price_predicate(options: PropertySearchOptions) -> Optional[FilterPredicate]:
    if options.maximum_price_per_night is None:
        return None
    cents = dollars_to_cents(options.maximum_price_per_night)
    return FilterPredicate("maximum_price_per_night", FilterStage.WHERE, Property.cost_per_night <= cents, cents)


def _minimum_rating_predicate(options: PropertySearchOptions) -> Optional[FilterPredicate]:
    if options.minimum_rating is None:
        return None
    return FilterPredicate("minimum_rating", FilterStage.HAVING, average_rating > options.minimum_rating, options.minimum_rating)


# Order matters: it fixes the order of bound parameters in the statement
PREDICATE_BUILDERS: List[Callable[[PropertySearchOptions], Optional[FilterPredicate]]] = [
    _city_predicate,
    _owner_predicate,
    _minimum_price_predicate,
    _maximum_price_predicate,
    _minimum_rating_predicate,
]


def build_predicates(options: PropertySearchOptions) -> List[FilterPredicate]:
    """Return the predicates for every option that is set."""
    predicates = []
    for builder in PREDICATE_BUILDERS:
        predicate = builder(options)
        if predicate is not None:
            predicates.append(predicate)
    return predicates


class PropertyQueryBuilder:
    """
    Builds the property search statement:

        SELECT properties.*, avg(property_reviews.rating) AS average_rating
        FROM properties JOIN property_reviews ON properties.id = property_reviews.property_id
        [WHERE ...] GROUP BY properties.id [HAVING ...]
        ORDER BY cost_per_night, properties.id LIMIT :limit

    Properties without reviews never match because of the inner join.
    """

    def __init__(self, options: Optional[PropertySearchOptions] = None, limit: int = 10):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.options = options or PropertySearchOptions()
        self.limit = limit
        self.predicates = build_predicates(self.options)

    def _clauses(self, stage: FilterStage) -> List[ColumnElement]:
        return [p.clause for p in self.predicates if p.stage == stage]

    @property
    def where_clauses(self) -> List[ColumnElement]:
        return self._clauses(FilterStage.WHERE)

    @property
    def having_clauses(self) -> List[ColumnElement]:
        return self._clauses(FilterStage.HAVING)

    def params(self) -> List[Any]:
        """Bound values in statement order, with the limit last."""
        return [p.value for p in self.predicates] + [self.limit]

    def build(self) -> Select:
        query = (
            select(Property, average_rating.label("average_rating"))
            .join(PropertyReview, Property.id == PropertyReview.property_id)
        )

        where = self.where_clauses
        if where:
            query = query.where(and_(*where))

        query = query.group_by(Property.id)

        having = self.having_clauses
        if having:
            query = query.having(and_(*having))

        query = query.order_by(Property.cost_per_night, Property.id).limit(self.limit)

        logger.debug(
            f"Built property search with {len(where)} row filters and {len(having)} rating filters"
        )
        return query
