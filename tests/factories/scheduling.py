"""Factory Boy definition for :class:`Scheduling`."""

from __future__ import annotations

import factory

from petcare.models.enums import SchedulingType
from petcare.models.scheduling import Scheduling
from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class SchedulingFactory(BaseFactory):
    class Meta:
        model = Scheduling

    id = None
    user = factory.SubFactory(UserFactory)
    title = factory.Faker("sentence", nb_words=3)
    description = factory.Faker("paragraph")
    day = factory.Faker("random_int", min=1, max=28)
    month = factory.Faker("random_int", min=1, max=12)
    year = 2024
    type = SchedulingType.SUCCESS
