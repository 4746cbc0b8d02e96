"""Translated messages for profile form errors."""

from domain.entities.user import MAX_LINKS, Language

_MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "user.form.error.firstname.required": "First name is required",
        "user.form.error.firstname.size": "First name must be at most 30 characters",
        "user.form.error.lastname.required": "Last name is required",
        "user.form.error.lastname.size": "Last name must be at most 30 characters",
        "user.form.error.email.required": "Email is required",
        "user.form.error.email": "Email is not valid",
        "user.form.error.company.size": "Company must be at most 60 characters",
        "user.form.error.description.fr.required": "French description is required",
        "user.form.error.description.fr": "French description is not valid",
        "user.form.error.description.en.required": "English description is required",
        "user.form.error.description.en": "English description is not valid",
        "user.form.error.photourl": "Photo URL is not valid",
    },
    Language.FRENCH: {
        "user.form.error.firstname.required": "Le prénom est obligatoire",
        "user.form.error.firstname.size": "Le prénom doit faire au plus 30 caractères",
        "user.form.error.lastname.required": "Le nom est obligatoire",
        "user.form.error.lastname.size": "Le nom doit faire au plus 30 caractères",
        "user.form.error.email.required": "L'email est obligatoire",
        "user.form.error.email": "L'email n'est pas valide",
        "user.form.error.company.size": "La société doit faire au plus 60 caractères",
        "user.form.error.description.fr.required": "La description en français est obligatoire",
        "user.form.error.description.fr": "La description en français n'est pas valide",
        "user.form.error.description.en.required": "La description en anglais est obligatoire",
        "user.form.error.description.en": "La description en anglais n'est pas valide",
        "user.form.error.photourl": "L'URL de la photo n'est pas valide",
    },
}

for _position in range(1, MAX_LINKS + 1):
    _MESSAGES[Language.ENGLISH].update(
        {
            f"user.form.error.link{_position}.name": (
                f"Name of link {_position} must be at most 30 characters"
            ),
            f"user.form.error.link{_position}.url": f"URL of link {_position} is not valid",
        }
    )
    _MESSAGES[Language.FRENCH].update(
        {
            f"user.form.error.link{_position}.name": (
                f"Le nom du lien {_position} doit faire au plus 30 caractères"
            ),
            f"user.form.error.link{_position}.url": (
                f"L'URL du lien {_position} n'est pas valide"
            ),
        }
    )


def translate(key: str, language: Language) -> str:
    """Message for a key, falling back to the key itself."""
    return _MESSAGES[language].get(key, key)


def translate_errors(errors: dict[str, str], language: Language) -> dict[str, str]:
    return {field: translate(key, language) for field, key in errors.items()}
