import logging
import socket
import urllib.error
import urllib.parse
import urllib.request

from blogger_client.types import AuthenticationError, HttpResponse, TransportError

CLIENT_LOGIN_URL = "https://www.google.com/accounts/ClientLogin"
APPLICATION_NAME = "blogger-client-python"


class BloggerHttp:
    def __init__(self, auth_token: str | None = None, timeout: int = 10) -> None:
        self.auth_token = auth_token
        self.timeout = timeout

    def login(self, login_id: str, password: str) -> str:
        form = urllib.parse.urlencode(
            {
                "Email": login_id,
                "Passwd": password,
                "service": "blogger",
                "accountType": "GOOGLE",
                "source": APPLICATION_NAME,
            }
        ).encode("utf-8")
        request = urllib.request.Request(
            CLIENT_LOGIN_URL,
            data=form,
            method="POST",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        logging.info("Logging in as %s", login_id)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                payload = response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as exc:
            raise AuthenticationError(f"Login rejected for {login_id}: {exc}") from exc
        except (urllib.error.URLError, TimeoutError, socket.timeout) as exc:
            raise TransportError(f"Unable to reach login service: {exc}") from exc

        for line in payload.splitlines():
            if line.startswith("Auth="):
                self.auth_token = line[len("Auth="):].strip()
                return self.auth_token
        raise AuthenticationError("Login response carried no Auth token.")

    def headers(self) -> dict[str, str]:
        headers = {
            "GData-Version": "2",
            "Content-Type": "application/atom+xml",
        }
        if self.auth_token:
            headers["Authorization"] = f"GoogleLogin auth={self.auth_token}"
        return headers

    def request(self, method: str, url: str, body: str | None = None) -> HttpResponse:
        data = body.encode("utf-8") if body is not None else None
        try:
            request = urllib.request.Request(
                url, data=data, method=method, headers=self.headers()
            )
        except ValueError as exc:
            raise TransportError(f"{method} {url!r}: invalid URL ({exc})") from exc
        logging.info("%s %s", method, url)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return HttpResponse(
                    status=response.status,
                    reason=response.reason,
                    body=response.read().decode("utf-8", errors="replace"),
                )
        except urllib.error.HTTPError as exc:
            # Error statuses are reported to the caller, not raised.
            logging.info("%s %s failed: %s", method, url, exc.code)
            return HttpResponse(
                status=exc.code,
                reason=str(exc.reason),
                body=exc.read().decode("utf-8", errors="replace"),
            )
        except (urllib.error.URLError, TimeoutError, socket.timeout) as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

    def get(self, url: str) -> HttpResponse:
        return self.request("GET", url)

    def put(self, url: str, body: str) -> HttpResponse:
        return self.request("PUT", url, body)

    def post(self, url: str, body: str) -> HttpResponse:
        return self.request("POST", url, body)

    def delete(self, url: str) -> HttpResponse:
        return self.request("DELETE", url)
