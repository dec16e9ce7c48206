"""Tests for mapping records to DisplayItems."""

import pytest
from pydantic import ValidationError

from folio.content.models import BlogPost, SpeakingEngagement
from folio.errors import MissingRequiredField
from folio.rendering.models import RenderOptions
from folio.rendering.renderer import format_date, render_item, render_items


def _talk(**kwargs: object) -> SpeakingEngagement:
    data: dict[str, object] = {
        "title": "Static Sites at Scale",
        "published_at": "2023-01-05T09:30:00Z",
        "organizer": "JSConf",
        "description": "How we ship markdown to millions.",
    }
    data.update(kwargs)
    return SpeakingEngagement(**data)  # type: ignore[arg-type]


class TestRenderItem:
    def test_fields(self):
        item = render_item(
            _talk(link="https://example.com/talk", website_link="https://jsconf.com")
        )
        assert item.heading == "Static Sites at Scale"
        assert item.subheading == "JSConf"
        assert item.formatted_date == "January 5, 2023"
        assert item.iso_date == "2023-01-05T09:30:00+00:00"
        assert item.body_text == "How we ship markdown to millions."
        assert item.primary_link == "https://example.com/talk"
        assert item.secondary_link == "https://jsconf.com"
        assert item.status is None

    def test_heading_without_link_is_plain(self):
        item = render_item(_talk())
        assert item.primary_link is None
        assert item.heading_is_link is False

    def test_heading_with_link(self):
        item = render_item(_talk(link="https://example.com/talk"))
        assert item.heading_is_link is True
        assert item.has_secondary_link is False

    def test_both_links_are_distinct(self):
        item = render_item(
            _talk(link="https://example.com/talk", website_link="https://jsconf.com")
        )
        assert item.heading_is_link
        assert item.has_secondary_link
        assert item.primary_link != item.secondary_link

    def test_post_without_author(self):
        item = render_item(BlogPost(title="Notes", published_at="2023-03-02"))
        assert item.subheading == ""
        assert item.body_text == ""
        assert item.formatted_date == "March 2, 2023"

    def test_post_with_author(self):
        item = render_item(BlogPost(title="Notes", published_at="2023-03-02", author="Jane"))
        assert item.subheading == "Jane"

    def test_show_time(self):
        item = render_item(_talk(), RenderOptions(show_time=True))
        assert item.formatted_date == "January 5, 2023 | 09:30 AM"

    def test_date_only_by_default(self):
        item = render_item(_talk(published_at="2023-01-05T21:45:00Z"))
        assert item.formatted_date == "January 5, 2023"

    def test_timezone_shifts_calendar_date(self):
        item = render_item(
            _talk(published_at="2023-01-05T02:00:00Z"),
            RenderOptions(timezone="America/New_York"),
        )
        assert item.formatted_date == "January 4, 2023"

    def test_event_date_displayed(self):
        item = render_item(_talk(event_date="2023-06-15"))
        assert item.formatted_date == "June 15, 2023"
        assert item.iso_date.startswith("2023-06-15")

    def test_status_labels(self):
        assert render_item(_talk(completed=False)).status == "Upcoming"
        draft = BlogPost(title="WIP", published_at="2023-01-01", draft=True)
        assert render_item(draft).status == "Draft"

    def test_missing_title(self):
        record = SpeakingEngagement.model_construct(
            published_at="2023-01-01T00:00:00Z", organizer="Org"
        )
        with pytest.raises(MissingRequiredField) as exc_info:
            render_item(record)
        assert exc_info.value.field == "title"

    def test_missing_published_at(self):
        record = BlogPost.model_construct(title="No date")
        with pytest.raises(MissingRequiredField) as exc_info:
            render_item(record)
        assert exc_info.value.field == "published_at"


class TestRenderItems:
    def test_preserves_order(self):
        records = [
            BlogPost(title="first", published_at="2020-01-01"),
            BlogPost(title="second", published_at="2024-01-01"),
        ]
        assert [i.heading for i in render_items(records)] == ["first", "second"]

    def test_empty(self):
        assert render_items([]) == []


class TestFormatDate:
    def test_custom_format(self):
        options = RenderOptions(date_format="%Y-%m-%d")
        item = render_item(_talk(), options)
        assert item.formatted_date == "2023-01-05"

    def test_unpadded_day(self):
        moment = BlogPost(title="x", published_at="2023-11-09").published_at
        assert format_date(moment) == "November 9, 2023"


class TestRenderOptions:
    def test_defaults(self):
        options = RenderOptions()
        assert options.show_time is False
        assert options.timezone == "UTC"

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError):
            RenderOptions(timezone="Mars/Olympus_Mons")
