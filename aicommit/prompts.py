"""Prompts for the aicommit tool."""

COMMIT_MESSAGE_PROMPT = '''Analyze the following code changes and generate a concise Git commit message, providing it in the following language: {language}. Text only:

{diff}

{notes}
'''

# Language codes commonly passed with --lang; anything else is sent as given
LANGUAGE_NAMES = {
    "en": "English",
    "zh": "Chinese",
    "zh-cn": "Simplified Chinese",
    "zh-tw": "Traditional Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "fr": "French",
    "de": "German",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ar": "Arabic",
    "hi": "Hindi",
}


def describe_language(code: str) -> str:
    """Expand a language code for the prompt, e.g. ``fr`` -> ``French (fr)``."""
    name = LANGUAGE_NAMES.get(code.strip().lower())
    if name:
        return f"{name} ({code})"
    return code
