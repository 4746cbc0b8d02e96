"""Unit tests for profile presentation mappers."""

from dataclasses import replace

import pytest

from api.web.dtos import (
    LinkDto,
    is_speaker_star,
    logo_type,
    logo_webp_url,
    to_link_dto_slots,
    to_profile_dto,
    to_speaker_star_dto,
    to_talk_dto,
)
from domain.entities.talk import Talk
from domain.entities.user import Language, Link, User
from infrastructure.crypto.cryptographer import Cryptographer
from infrastructure.markdown.converter import MarkdownConverter


class TestLogo:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://mixitconf.org/a.svg", "image/svg+xml"),
            ("https://mixitconf.org/a.png", "image/png"),
            ("https://mixitconf.org/a.jpg", "image/jpeg"),
            ("https://mixitconf.org/a.gif", "image/gif"),
            ("https://mixitconf.org/a.txt", None),
            (None, None),
        ],
    )
    def test_logo_type(self, url: str | None, expected: str | None):
        assert logo_type(url) == expected

    def test_webp_url_replaces_trailing_extension(self):
        assert logo_webp_url("https://mixitconf.org/a.png") == "https://mixitconf.org/a.webp"
        assert logo_webp_url("https://cdn.png.io/a.jpg") == "https://cdn.png.io/a.webp"

    @pytest.mark.parametrize("url", [None, "https://mixitconf.org/a.gif", "https://png.io/a.svg"])
    def test_webp_url_absent_for_other_formats(self, url: str | None):
        assert logo_webp_url(url) is None


class TestLinkSlots:
    def test_pads_to_five_labelled_slots(self):
        slots = to_link_dto_slots([Link("GitHub", "https://github.com/ada")])

        assert list(slots) == ["link1", "link2", "link3", "link4", "link5"]
        assert slots["link1"] == [LinkDto("GitHub", "https://github.com/ada", "link1")]
        assert slots["link5"] == [LinkDto("", "", "link5")]

    def test_full_list_is_returned_as_is(self):
        links = [Link(f"L{i}", f"https://l{i}.dev") for i in range(5)]

        assert to_link_dto_slots(links) is links


class TestSpeakerStar:
    def test_matches_login(self, stored_user: User):
        assert is_speaker_star(replace(stored_user, login="dgageot"))

    def test_matches_plain_email(self, stored_user: User):
        assert is_speaker_star(stored_user, "sam@sambrannen.com")

    def test_regular_speaker(self, stored_user: User, plain_email: str):
        assert not is_speaker_star(stored_user, plain_email)

    def test_star_dto(self, stored_user: User):
        star = to_speaker_star_dto(stored_user)

        assert (star.login, star.key, star.name) == ("ada", "lovelace", "Ada Lovelace")


class TestProfileDto:
    def test_decrypts_email_and_renders_description(
        self, stored_user: User, cryptographer: Cryptographer, plain_email: str
    ):
        user = replace(stored_user, description={Language.ENGLISH: "**Hi**"})

        dto = to_profile_dto(user, Language.ENGLISH, cryptographer, MarkdownConverter())

        assert dto.email == plain_email
        assert dto.description == "<p><strong>Hi</strong></p>"
        assert dto.logo_type == "image/png"
        assert dto.logo_webp_url == "https://mixitconf.org/images/ada.webp"

    def test_missing_translation_renders_empty(
        self, stored_user: User, cryptographer: Cryptographer
    ):
        user = replace(stored_user, description={Language.ENGLISH: "Hello"})

        dto = to_profile_dto(user, Language.FRENCH, cryptographer, MarkdownConverter())

        assert dto.description == ""

    def test_talk_summary_is_rendered(self):
        talk = Talk(title="Engines", event="2024", summary="*wow*", speaker_ids=["ada"])

        dto = to_talk_dto(talk, MarkdownConverter())

        assert dto.summary == "<p><em>wow</em></p>"
        assert dto.speakers == ["ada"]
        assert dto.id == str(talk.id)
