"""
GraphQL integration.

Example Usage:
    import graphene
    from supermodel.graphql import SuperModelMetadataQuery

    class Query(SuperModelMetadataQuery, graphene.ObjectType):
        pass

    schema = graphene.Schema(query=Query)
"""

from .queries import SuperModelMetadataQuery
from .types import (
    ChoiceType,
    ModelMetadataType,
    OperationTypeEnum,
    PropertyMetadataType,
)

__all__ = [
    "ChoiceType",
    "ModelMetadataType",
    "OperationTypeEnum",
    "PropertyMetadataType",
    "SuperModelMetadataQuery",
]
