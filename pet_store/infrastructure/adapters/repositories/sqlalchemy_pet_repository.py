import operator
import uuid
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import false, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.elements import ColumnElement

from pet_store.domain.models.pet import Pet as DomainPet
from pet_store.domain.models.pet import PetType
from pet_store.domain.models.pet_query import (
    FilterableField,
    FilterOperator,
    FilterValue,
    NumericValue,
    QueryFilterSet,
    SortDirection,
    SortDirective,
)
from pet_store.domain.ports.repositories.pet_repository import PetRepository
from pet_store.infrastructure.persistence.models import Pet as SQLPet

_COMPARATORS: Dict[FilterOperator, Callable[[Any, Any], ColumnElement]] = {
    FilterOperator.EQ: operator.eq,
    FilterOperator.GT: operator.gt,
    FilterOperator.GTE: operator.ge,
    FilterOperator.LT: operator.lt,
    FilterOperator.LTE: operator.le,
}

_COLUMNS = {
    FilterableField.AGE: SQLPet.age,
    FilterableField.COST: SQLPet.cost,
    FilterableField.TYPE: SQLPet.type,
    FilterableField.NAME: SQLPet.name,
}

_NUMERIC_FIELDS = frozenset({FilterableField.AGE, FilterableField.COST})


class SQLAlchemyPetRepository(PetRepository):
    """Pet store over SQLAlchemy.

    Every method opens its own session, so the counts and the page fetch of a
    listing can run at the same time.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _to_domain(self, sql_pet: SQLPet) -> DomainPet:
        return DomainPet(
            id=sql_pet.id,
            name=sql_pet.name,
            type=PetType(sql_pet.type),
            age=sql_pet.age,
            cost=sql_pet.cost,
            created_at=sql_pet.created_at,
            updated_at=sql_pet.updated_at,
        )

    def _condition(self, field: FilterableField, op: FilterOperator, value: FilterValue) -> ColumnElement:
        if field in _NUMERIC_FIELDS:
            if not isinstance(value, NumericValue):
                # text never compares to a number
                return false()
            operand = value.value
        else:
            operand = value.raw if isinstance(value, NumericValue) else value.value
        return _COMPARATORS[op](_COLUMNS[field], operand)

    def _where(self, filters: QueryFilterSet) -> List[ColumnElement]:
        conditions = []
        for field, field_filter in filters.fields():
            for op, value in field_filter.constraints():
                conditions.append(self._condition(field, op, value))
        return conditions

    async def count_all(self) -> int:
        async with self.session_factory() as session:
            return await session.scalar(select(func.count()).select_from(SQLPet))

    async def count(self, filters: QueryFilterSet) -> int:
        query = select(func.count()).select_from(SQLPet).where(*self._where(filters))
        async with self.session_factory() as session:
            return await session.scalar(query)

    async def find(
        self,
        filters: QueryFilterSet,
        offset: int = 0,
        limit: int = 100,
        sort: Optional[SortDirective] = None,
    ) -> List[DomainPet]:
        query = select(SQLPet).where(*self._where(filters))
        if sort is not None:
            column = _COLUMNS[FilterableField(sort.field.value)]
            query = query.order_by(column.desc() if sort.direction == SortDirection.DESC else column.asc())
        query = query.offset(offset).limit(limit)

        async with self.session_factory() as session:
            sql_pets = (await session.scalars(query)).all()
            return [self._to_domain(sql_pet) for sql_pet in sql_pets]

    async def create(self, pet: DomainPet) -> DomainPet:
        sql_pet = SQLPet(name=pet.name, type=pet.type.value, age=pet.age, cost=pet.cost)
        async with self.session_factory() as session:
            session.add(sql_pet)
            await session.commit()
            await session.refresh(sql_pet)
            return self._to_domain(sql_pet)

    async def update(self, pet_id: uuid.UUID, changes: Dict[str, Any]) -> Optional[DomainPet]:
        async with self.session_factory() as session:
            sql_pet = await session.get(SQLPet, pet_id)
            if not sql_pet:
                return None

            for key, value in changes.items():
                setattr(sql_pet, key, value.value if isinstance(value, PetType) else value)

            await session.commit()
            await session.refresh(sql_pet)
            return self._to_domain(sql_pet)

    async def delete(self, pet_id: uuid.UUID) -> Optional[DomainPet]:
        async with self.session_factory() as session:
            sql_pet = await session.get(SQLPet, pet_id)
            if not sql_pet:
                return None

            deleted_pet = self._to_domain(sql_pet)
            await session.delete(sql_pet)
            await session.commit()
            return deleted_pet
