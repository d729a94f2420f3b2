"""
Integration tests for the GraphQL metadata query.
"""

import graphene
import pytest

from supermodel import SuperModel, model_registry
from supermodel.graphql import SuperModelMetadataQuery
from tests.models import BasicModel, Car

pytestmark = pytest.mark.integration


class Query(SuperModelMetadataQuery, graphene.ObjectType):
    pass


schema = graphene.Schema(query=Query)


class Garage(SuperModel):
    def get_model_name(self):
        return "garage"

    def get_structure(self):
        super().get_structure()
        self.add_property("size").set_choices([(None, "---"), ("s", "Small")])


METADATA_QUERY = """
query Metadata($name: String!, $operation: OperationType) {
  supermodelMetadata(modelName: $name, operation: $operation) {
    modelName
    humanNamePlural
    primaryKey
    listKeys
    operation
    properties {
      name
      label
      widget
      propertyType
      required
      hidden
      editable
      isPrimaryKey
      updateStrategy
      defaultValue
      choices {
        value
        label
      }
    }
  }
}
"""


@pytest.fixture
def registered_models():
    model_registry.register("car", Car)
    model_registry.register("basic", BasicModel)


def _properties_by_name(payload):
    return {prop["name"]: prop for prop in payload["properties"]}


def test_metadata_for_update(registered_models):
    result = schema.execute(
        METADATA_QUERY, variable_values={"name": "car", "operation": "UPDATE"}
    )

    assert result.errors is None
    payload = result.data["supermodelMetadata"]
    assert payload["modelName"] == "car"
    assert payload["humanNamePlural"] == "Cars"
    assert payload["primaryKey"] == "id"
    assert payload["listKeys"] == ["id", "marque", "type"]
    assert payload["operation"] == "UPDATE"

    properties = _properties_by_name(payload)
    assert list(properties) == Car().get_property_names()

    assert properties["id"]["isPrimaryKey"] is True
    assert properties["id"]["editable"] is False
    assert properties["id"]["updateStrategy"] == "IMMUTABLE"
    assert properties["id"]["widget"] == "textfield"

    assert properties["marque"]["editable"] is True
    assert properties["marque"]["propertyType"] == "string"
    assert properties["marque"]["choices"] == [
        {"value": "ford", "label": "Ford"},
        {"value": "vauxhall", "label": "Vauxhall"},
    ]

    assert properties["registration"]["editable"] is False
    assert properties["colour"]["defaultValue"] == "black"
    assert properties["colour"]["choices"] is None
    assert properties["stock_code"]["hidden"] is True


def test_metadata_for_create(registered_models):
    result = schema.execute(
        METADATA_QUERY, variable_values={"name": "car", "operation": "CREATE"}
    )

    assert result.errors is None
    properties = _properties_by_name(result.data["supermodelMetadata"])
    assert properties["registration"]["editable"] is True
    assert properties["id"]["editable"] is False


def test_metadata_without_operation(registered_models):
    result = schema.execute(METADATA_QUERY, variable_values={"name": "basic"})

    assert result.errors is None
    payload = result.data["supermodelMetadata"]
    assert payload["operation"] is None
    assert payload["properties"][0]["editable"] is None
    assert payload["properties"][0]["label"] == "Identifier"


def test_unknown_model_is_graphql_error():
    result = schema.execute(METADATA_QUERY, variable_values={"name": "boat"})

    assert result.data["supermodelMetadata"] is None
    assert result.errors[0].message == "Model 'boat' not found."


def test_available_models(registered_models):
    result = schema.execute("{ availableSupermodels }")

    assert result.errors is None
    assert result.data["availableSupermodels"] == ["basic", "car"]


def test_blank_choice_value_is_null():
    model_registry.register("garage", Garage)

    result = schema.execute(METADATA_QUERY, variable_values={"name": "garage"})

    assert result.errors is None
    properties = _properties_by_name(result.data["supermodelMetadata"])
    assert properties["size"]["choices"] == [
        {"value": None, "label": "---"},
        {"value": "s", "label": "Small"},
    ]
