from oneshot.core.models import CommandResult, Failure

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def map_result(result: CommandResult, error_prefix: str) -> tuple[int, str]:
    """
    Converts a result into a process exit status and diagnostic.

    Success output has already been emitted, so its message is empty. A
    failure yields two lines: the operation prefix, then the error text.
    """
    if not isinstance(result, Failure):
        return EXIT_SUCCESS, ""

    detail = result.error.message or f"{result.error.kind} error"
    prefix = error_prefix or "Got an error:"
    return EXIT_FAILURE, f"{prefix}\n{detail}"
