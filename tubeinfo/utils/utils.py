from urllib.parse import urlparse

import yaml
import yt_dlp  # type: ignore
from rich.markup import escape
from rich.style import Style

from tubeinfo import console, error_console


def module_log(module: str, module_style: str | Style | None, *args, **kwargs):
    console.print(f"[{module_style}]\\[{module}][/{module_style}] " + escape(" ".join(map(str, args))), **kwargs)


def module_error(module: str, *args, **kwargs):
    error_console.print(f"[bold red]\\[{module}][/bold red] " + escape(" ".join(map(str, args))), **kwargs)


def validate_url(x):
    try:
        result = urlparse(x)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def _extractor_error(exc: BaseException) -> yt_dlp.utils.ExtractorError | None:
    # YoutubeDL.extract_info reraises extractor failures as DownloadError, the original
    # ExtractorError sits in exc_info or, for network failures, in the exception context
    candidates = []
    exc_info = getattr(exc, "exc_info", None)
    if isinstance(exc_info, tuple) and len(exc_info) == 3:
        candidates.append(exc_info[1])

    cause: BaseException | None = exc
    while cause is not None:
        candidates.append(cause)
        cause = cause.__cause__ or cause.__context__

    for candidate in candidates:
        if isinstance(candidate, yt_dlp.utils.ExtractorError):
            return candidate
    return None


def error_message(exc: BaseException) -> str:
    # ExtractorError keeps the bare message in orig_msg, str() adds the "ERROR: [extractor] id:" prefix
    extractor_error = _extractor_error(exc)
    if extractor_error is not None and extractor_error.orig_msg:
        return extractor_error.orig_msg

    return str(exc).removeprefix("ERROR: ")


class PrettyDumper(yaml.Dumper):
    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)
