from inventory_web.forms import Form, FormField, text_field


def _inventory_form():
    return Form(
        name=text_field(required=True),
        category=text_field(required=True),
        quantity=FormField(default=0, required=True, min_value=0, coerce=int),
    )


def test_new_form_is_invalid_until_required_fields_are_set():
    form = _inventory_form()

    assert form.errors() == {"name": ["Name is required"], "category": ["Category is required"]}

    form.patch_value({"name": "Bolt", "category": "Hardware", "unknown": "ignored"})

    assert form.is_valid()
    assert form.value() == {"name": "Bolt", "category": "Hardware", "quantity": 0}


def test_max_length_and_min_value():
    form = _inventory_form()
    form.patch_value({"name": "n" * 256, "category": "Hardware", "quantity": -1})

    assert form.errors() == {
        "name": ["Name cannot exceed 255 characters"],
        "quantity": ["Quantity must be at least 0"],
    }


def test_quantity_text_is_coerced():
    form = _inventory_form()
    form.patch_value({"name": "Bolt", "category": "Hardware", "quantity": "12"})

    assert form.value()["quantity"] == 12


def test_non_numeric_quantity_is_an_error():
    form = _inventory_form()
    form.patch_value({"name": "Bolt", "category": "Hardware", "quantity": "many"})

    assert form.errors() == {"quantity": ["Quantity must be a number"]}


def test_blank_optional_text_is_submitted_as_none():
    form = Form(name=text_field(required=True), email=text_field())
    form.set("name", " Acme ")
    form.set("email", "   ")

    assert form.value() == {"name": "Acme", "email": None}


def test_reset_restores_defaults():
    form = _inventory_form()
    form.patch_value({"name": "Bolt", "quantity": 5})

    form.reset()

    assert form["name"].value == ""
    assert form["quantity"].value == 0
