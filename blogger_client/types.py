from dataclasses import dataclass


@dataclass
class HttpResponse:
    status: int
    reason: str
    body: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}".strip()


class BloggerError(RuntimeError):
    pass


class ConfigError(BloggerError):
    pass


class AuthenticationError(BloggerError):
    pass


class TransportError(BloggerError):
    pass


class MalformedDocument(BloggerError):
    pass


class UnsavedEntryError(BloggerError):
    pass


class SaveFailed(BloggerError):
    def __init__(self, status_line: str) -> None:
        super().__init__(f"Unable to save entry: {status_line}")
        self.status_line = status_line


class DeleteFailed(BloggerError):
    def __init__(self, status_line: str) -> None:
        super().__init__(f"Unable to delete entry: {status_line}")
        self.status_line = status_line


class MissingLinkError(BloggerError):
    pass
