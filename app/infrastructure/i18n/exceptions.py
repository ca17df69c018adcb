"""Custom exceptions for the translation engine.

A translation that cannot be found is not an error: the Translator returns
the bare key instead. These exceptions cover the failures that are surfaced
to callers.
"""


class TranslationError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            await translator.translate("en", "greeting", args, options)
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class TranslationBackendError(TranslationError):
    """Raised when a backend fails to read or parse translation data.

    Distinct from a backend returning None, which means the backend has no
    data for the requested language and namespace.

    Example:
        >>> await backend.load_namespace("en", "broken")
        Traceback (most recent call last):
        ...
        TranslationBackendError: Failed to parse locales/en/broken.yaml: ...
    """

    def __init__(self, message: str, language: str = "", namespace: str = ""):
        super().__init__(message)
        self.language = language
        self.namespace = namespace


class NestedArgumentsError(TranslationError, ValueError):
    """Raised when the arguments payload of a $t(key, {...}) reference is not valid JSON.

    Example:
        >>> await interpolator.nest("$t(key, {broken)", "en", {}, translate)
        Traceback (most recent call last):
        ...
        NestedArgumentsError: Invalid nested arguments '{broken': ...
    """

    def __init__(self, message: str, payload: str = ""):
        super().__init__(message)
        self.payload = payload
