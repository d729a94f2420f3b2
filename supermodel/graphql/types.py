"""GraphQL types for model and property metadata."""

import graphene
from graphene.types.generic import GenericScalar

from ..operations import OperationType

OperationTypeEnum = graphene.Enum.from_enum(
    OperationType, description="Operation performed on a model"
)


class ChoiceType(graphene.ObjectType):
    """GraphQL type for choice options."""

    value = graphene.String(description="Choice value, null for a blank option")
    label = graphene.String(required=True, description="Choice label")


class PropertyMetadataType(graphene.ObjectType):
    """GraphQL type for a single model property."""

    name = graphene.String(required=True, description="Property name")
    label = graphene.String(required=True, description="Human readable label")
    property_type = graphene.String(description="Value type hint")
    widget = graphene.String(required=True, description="Widget hint")
    default_value = GenericScalar(description="Resolved default value")
    description = graphene.String(description="Property description")
    required = graphene.Boolean(required=True)
    hidden = graphene.Boolean(required=True)
    unique = graphene.Boolean(required=True)
    disabled = graphene.Boolean(required=True)
    max_length = graphene.Int(description="Maximum value length")
    choices = graphene.List(graphene.NonNull(ChoiceType), description="Choices")
    update_strategy = graphene.String(
        required=True, description="Update strategy name"
    )
    has_default_callback = graphene.Boolean(required=True)
    has_choices_callback = graphene.Boolean(required=True)
    is_primary_key = graphene.Boolean(required=True)
    editable = graphene.Boolean(
        description="Editability for the requested operation, if any"
    )


class ModelMetadataType(graphene.ObjectType):
    """GraphQL type for a model definition."""

    model_name = graphene.String(required=True, description="Model name")
    human_name = graphene.String(required=True, description="Human readable name")
    human_name_plural = graphene.String(required=True, description="Plural name")
    primary_key = graphene.String(description="Primary key property name")
    list_keys = graphene.List(
        graphene.NonNull(graphene.String),
        required=True,
        description="Keys shown when listing",
    )
    operation = graphene.String(description="Operation editability refers to")
    properties = graphene.List(
        graphene.NonNull(PropertyMetadataType),
        required=True,
        description="Properties in definition order",
    )
