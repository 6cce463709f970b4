DESCRIPTION_MIN = 50
DESCRIPTION_MAX = 2000
TITLE_MAX = 255

MESSAGES = {
    "description.required": "Please provide a description of your business idea.",
    "description.min": f"Your business idea description must be at least {DESCRIPTION_MIN} characters long to provide adequate analysis.",
    "description.max": f"Your business idea description cannot exceed {DESCRIPTION_MAX} characters.",
    "title.max": f"The title cannot exceed {TITLE_MAX} characters.",
}


def validate_submission(payload):
    """
    Validate a submitted idea.

    Returns (data, errors). `errors` maps field name -> message and is empty
    when the submission is valid; `data` always holds the cleaned values so a
    rejected form can be re-rendered with what the user typed.
    """
    errors = {}

    description = payload.get("description")
    description = description.strip() if isinstance(description, str) else ""
    title = payload.get("title")
    title = (title.strip() or None) if isinstance(title, str) else None

    if not description:
        errors["description"] = MESSAGES["description.required"]
    elif len(description) < DESCRIPTION_MIN:
        errors["description"] = MESSAGES["description.min"]
    elif len(description) > DESCRIPTION_MAX:
        errors["description"] = MESSAGES["description.max"]

    if title is not None and len(title) > TITLE_MAX:
        errors["title"] = MESSAGES["title.max"]

    return {"description": description, "title": title}, errors
