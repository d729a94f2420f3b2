"""
GraphQL query fields for SuperModel metadata.

Mix SuperModelMetadataQuery into a host schema's root query to expose the
definitions of every model the factory can load.
"""

import logging
from typing import Any, Optional

import graphene
from graphql import GraphQLError

from ..exceptions import ModelConfigurationError
from ..factory import SuperModelFactory
from ..operations import OperationType
from .types import ModelMetadataType, OperationTypeEnum

logger = logging.getLogger(__name__)


def _coerce_operation(operation: Any) -> Optional[OperationType]:
    if operation is None:
        return None
    return OperationType(getattr(operation, "value", operation))


class SuperModelMetadataQuery(graphene.ObjectType):
    """GraphQL queries for SuperModel metadata."""

    supermodel_metadata = graphene.Field(
        ModelMetadataType,
        model_name=graphene.String(required=True),
        operation=graphene.Argument(
            OperationTypeEnum,
            description="Operation used to compute property editability",
        ),
        description="Property metadata for a model loadable by name.",
    )
    available_supermodels = graphene.List(
        graphene.NonNull(graphene.String),
        required=True,
        description="Names of every model the factory can load.",
    )

    def resolve_supermodel_metadata(
        self, info, model_name: str, operation: Any = None
    ):
        try:
            model = SuperModelFactory.load(model_name)
        except ModelConfigurationError as exc:
            logger.warning("Metadata requested for unknown model '%s': %s", model_name, exc)
            raise GraphQLError(f"Model '{model_name}' not found.") from exc
        return model.to_metadata(_coerce_operation(operation))

    def resolve_available_supermodels(self, info):
        return sorted(SuperModelFactory().get_model_types())
