"""Model (note type) actions: fields, templates and styling."""

from anki_connect import api
from anki_connect._utils import acknowledge, maybe_add_field, require_params


def model_names():
    """List model names, e.g. Success(["Basic", "Basic (and reversed card)", "Cloze"])."""
    return api.invoke("modelNames")


def model_names_and_ids():
    return api.invoke("modelNamesAndIds")


def model_field_names(params):
    (model_name,) = require_params(params, "model_field_names", "model_name")
    return api.invoke("modelFieldNames", {"model_name": model_name})


def model_field_descriptions(params):
    (model_name,) = require_params(params, "model_field_descriptions", "model_name")
    return api.invoke("modelFieldDescriptions", {"model_name": model_name})


def model_field_fonts(params):
    (model_name,) = require_params(params, "model_field_fonts", "model_name")
    return api.invoke("modelFieldFonts", {"model_name": model_name})


def model_fields_on_templates(params):
    """Map each card template to the field names on its question and answer sides."""
    (model_name,) = require_params(params, "model_fields_on_templates", "model_name")
    return api.invoke("modelFieldsOnTemplates", {"model_name": model_name})


def create_model(params):
    """Create a model and return its description.

    Param::

        {
            "model_name": "newModelName",
            "in_order_fields": ["Field1", "Field2"],
            "css": "Optional CSS",
            "is_cloze": False,
            "card_templates": [
                {"Name": "Card 1", "Front": "{{Field1}}", "Back": "{{Field2}}"}
            ],
        }

    ``css`` and ``is_cloze`` are optional; template keys are sent verbatim.
    """
    model_name, in_order_fields, card_templates = require_params(
        params, "create_model", "model_name", "in_order_fields", "card_templates"
    )
    request = {
        "model_name": model_name,
        "in_order_fields": in_order_fields,
        "card_templates": card_templates,
    }
    request = maybe_add_field(request, "css", params.get("css"))
    request = maybe_add_field(request, "is_cloze", params.get("is_cloze"))
    return api.invoke("createModel", request)


def model_templates(params):
    (model_name,) = require_params(params, "model_templates", "model_name")
    return api.invoke("modelTemplates", {"model_name": model_name})


def model_styling(params):
    (model_name,) = require_params(params, "model_styling", "model_name")
    return api.invoke("modelStyling", {"model_name": model_name})


def update_model_templates(params):
    """Replace template content. Param: ``{"model": {"name": ..., "templates": {...}}}``."""
    (model,) = require_params(params, "update_model_templates", "model")
    name, templates = require_params(model, "update_model_templates", "name", "templates")
    return api.invoke("updateModelTemplates", {"model": {"name": name, "templates": templates}})


def update_model_styling(params):
    """Replace a model's CSS. Param: ``{"model": {"name": ..., "css": ...}}``."""
    (model,) = require_params(params, "update_model_styling", "model")
    name, css = require_params(model, "update_model_styling", "name", "css")
    return api.invoke("updateModelStyling", {"model": {"name": name, "css": css}})


def find_and_replace_in_models(params):
    """Find and replace text in templates and CSS; returns the number of models changed.

    Param::

        {"model": {"model_name": "Basic", "find_text": "x", "replace_text": "y",
                   "front": True, "back": True, "css": True}}

    ``front``, ``back`` and ``css`` select where to replace and default to False.
    An empty ``model_name`` targets every model.
    """
    (model,) = require_params(params, "find_and_replace_in_models", "model")
    model_name, find_text, replace_text = require_params(
        model, "find_and_replace_in_models", "model_name", "find_text", "replace_text"
    )
    request = {
        "model_name": model_name,
        "find_text": find_text,
        "replace_text": replace_text,
        "front": model.get("front", model.get("Front", False)),
        "back": model.get("back", model.get("Back", False)),
        "css": model.get("css", False),
    }
    return api.invoke("findAndReplaceInModels", {"model": request})


def model_template_rename(params):
    model_name, old_name, new_name = require_params(
        params, "model_template_rename", "model_name", "old_template_name", "new_template_name"
    )
    return api.invoke(
        "modelTemplateRename",
        {
            "model_name": model_name,
            "old_template_name": old_name,
            "new_template_name": new_name,
        },
    )


def model_template_reposition(params):
    """Move a template to ``index`` (0-based) within its model."""
    model_name, template_name, index = require_params(
        params, "model_template_reposition", "model_name", "template_name", "index"
    )
    return api.invoke(
        "modelTemplateReposition",
        {"model_name": model_name, "template_name": template_name, "index": index},
    )


def model_template_add(params):
    """Add a template to a model.

    Param: ``{"model_name": "Basic", "template": {"name": "Card 3",
    "Front": "Front html {{Field1}}", "Back": "Back html {{Field2}}"}}``.
    Use update_model_templates to change an existing template.
    """
    model_name, template = require_params(params, "model_template_add", "model_name", "template")
    if "name" not in template and "Name" in template:
        template = {**template, "name": template["Name"]}
    name, front, back = require_params(template, "model_template_add", "name", "Front", "Back")
    return api.invoke(
        "modelTemplateAdd",
        {
            "model_name": model_name,
            "template": {"Name": name, "Front": front, "Back": back},
        },
    )


def model_template_remove(params):
    model_name, template_name = require_params(
        params, "model_template_remove", "model_name", "template_name"
    )
    return api.invoke(
        "modelTemplateRemove",
        {"model_name": model_name, "template_name": template_name},
    )


def model_field_rename(params):
    model_name, old_name, new_name = require_params(
        params, "model_field_rename", "model_name", "old_field_name", "new_field_name"
    )
    return api.invoke(
        "modelFieldRename",
        {"model_name": model_name, "old_field_name": old_name, "new_field_name": new_name},
    )


def model_field_reposition(params):
    """Move a field to ``index`` (0-based) within the field list."""
    model_name, field_name, index = require_params(
        params, "model_field_reposition", "model_name", "field_name", "index"
    )
    return api.invoke(
        "modelFieldReposition",
        {"model_name": model_name, "field_name": field_name, "index": index},
    )


def model_field_add(params):
    """Add a field; without ``index`` it goes to the end of the field list."""
    model_name, field_name = require_params(params, "model_field_add", "model_name", "field_name")
    request = {"model_name": model_name, "field_name": field_name}
    request = maybe_add_field(request, "index", params.get("index"))
    return api.invoke("modelFieldAdd", request)


def model_field_remove(params):
    model_name, field_name = require_params(
        params, "model_field_remove", "model_name", "field_name"
    )
    return api.invoke("modelFieldRemove", {"model_name": model_name, "field_name": field_name})


def model_field_set_font(params):
    model_name, field_name, font = require_params(
        params, "model_field_set_font", "model_name", "field_name", "font"
    )
    return api.invoke(
        "modelFieldSetFont",
        {"model_name": model_name, "field_name": field_name, "font": font},
    )


def model_field_set_font_size(params):
    model_name, field_name, font_size = require_params(
        params, "model_field_set_font_size", "model_name", "field_name", "font_size"
    )
    return api.invoke(
        "modelFieldSetFontSize",
        {"model_name": model_name, "field_name": field_name, "font_size": font_size},
    )


def model_field_set_description(params):
    """Set the placeholder text shown in the editor while a field is empty."""
    model_name, field_name, description = require_params(
        params, "model_field_set_description", "model_name", "field_name", "description"
    )
    return acknowledge(
        api.invoke(
            "modelFieldSetDescription",
            {"model_name": model_name, "field_name": field_name, "description": description},
        ),
        "Cannot set the description. One possible reason is that older versions "
        "of Anki (2.1.49 and below) do not have field descriptions.",
    )
