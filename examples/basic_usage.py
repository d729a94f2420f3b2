from supermodel import (
    OperationType,
    SuperModel,
    SuperModelFactory,
    UpdateStrategy,
    register_model,
)


@register_model("car")
class Car(SuperModel):
    def get_model_name(self):
        return "car"

    def get_structure(self):
        self.add_property("id") \
            .set_label("Identifier") \
            .set_widget("textfield") \
            .set_required(True) \
            .set_update_strategy(UpdateStrategy.IMMUTABLE)

        self.add_property("marque") \
            .set_label("Marque") \
            .set_required(True) \
            .set_widget("select") \
            .set_choices_callback("get_marque_choices")

        self.add_property("type") \
            .set_label("Type") \
            .set_required(True) \
            .set_widget("select") \
            .set_choices_callback("get_type_choices")

        self.set_primary_key("id")

    def get_list_keys(self):
        return ["id", "marque"]

    def get_marque_choices(self):
        return {"ford": "Ford", "vauxhall": "Vauxhall"}

    def get_type_choices(self):
        return {"sedan": "Sedan", "hatchback": "Hatchback"}


car = SuperModelFactory.load("car")

car["id"] = "1"
car["marque"] = "ford"
car.type = "sedan"

all_properties = car.get_data()
editable = [p.get_name() for p in car.get_editable_properties(OperationType.UPDATE)]
