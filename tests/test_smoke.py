"""Basic smoke test for package imports and flow."""

from bdoprofile import (
    Fetcher,
    FetchResult,
    ProfileScraper,
    SessionController,
    State,
    Theme,
    render_profile,
)
from bdoprofile.controller import KeyPress, ProfileFetched, ProfileURLResolved
from bdoprofile.extractor import build_search_url

SEARCH_HTML = """<html><body><div class="box_list_area"><ul><li><div class="title">
<a href="/pt-BR/Adventure/Profile?profileTarget=x">Foo</a></div></li></ul></div></body></html>"""
PROFILE_HTML = """<html><body><div class="profile_detail"><div class="nick_wrap"><p class="nick">Foo</p></div>
</div></body></html>"""


def test_smoke_flow():
    fetcher = Fetcher()
    scraper = ProfileScraper(fetcher=fetcher, base_url="https://site.test")
    pages = {
        build_search_url("https://site.test", "Foo"): SEARCH_HTML,
        "https://site.test/pt-BR/Adventure/Profile?profileTarget=x": PROFILE_HTML,
    }
    fetcher.fetch = lambda url: FetchResult(url=url, html=pages[url])  # type: ignore

    controller = SessionController()
    for key in "Foo":
        controller.handle(KeyPress(key))
    resolve = controller.handle(KeyPress("enter"))
    url = scraper.resolve_profile_url(resolve.family_name)
    fetch = controller.handle(ProfileURLResolved(request_id=resolve.request_id, url=url))
    controller.handle(ProfileFetched(request_id=fetch.request_id, profile=scraper.fetch_profile(fetch.url)))

    assert controller.state == State.PROFILE_VIEW
    assert render_profile(controller.profile, Theme()).plain.startswith("Family: Foo")
