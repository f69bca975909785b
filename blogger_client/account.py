import logging

from blogger_client.adapters.blogger_http import BloggerHttp
from blogger_client.blog import Blog
from blogger_client.core.document import entries_from_feed
from blogger_client.types import BloggerError, ConfigError, HttpResponse

BLOGS_FEED_URL = "http://www.blogger.com/feeds/default/blogs"


class Blogger:
    """Account-level entry point: authentication and the list of blogs."""

    def __init__(
        self,
        login_id: str | None = None,
        password: str | None = None,
        auth_token: str | None = None,
        http: BloggerHttp | None = None,
    ) -> None:
        self.login_id = login_id
        self.password = password
        self.http = http or BloggerHttp()
        if auth_token:
            self.http.auth_token = auth_token
        self._blogs: list[Blog] | None = None

    def ensure_login(self) -> None:
        if self.http.auth_token:
            return
        if not self.login_id or not self.password:
            raise ConfigError("Login id and password are required to log in.")
        self.http.login(self.login_id, self.password)

    def blogs(self, refresh: bool = False) -> list[Blog]:
        if self._blogs is not None and not refresh:
            return self._blogs

        response = self.http_get(BLOGS_FEED_URL)
        if not response.is_success:
            raise BloggerError(f"Unable to fetch blogs: {response.status_line}")
        self._blogs = [
            Blog.build(self, node) for node in entries_from_feed(response.body)
        ]
        logging.info("Fetched %d blogs", len(self._blogs))
        return self._blogs

    def http_get(self, url: str) -> HttpResponse:
        self.ensure_login()
        return self.http.get(url)

    def http_put(self, url: str, body: str) -> HttpResponse:
        self.ensure_login()
        return self.http.put(url, body)

    def http_post(self, url: str, body: str) -> HttpResponse:
        self.ensure_login()
        return self.http.post(url, body)

    def http_delete(self, url: str) -> HttpResponse:
        self.ensure_login()
        return self.http.delete(url)
