from __future__ import annotations

import unittest
from datetime import datetime
from datetime import timezone

from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options
from asana_stories.entities.story import Story
from asana_stories.entities.story import StoryBase
from asana_stories.utils.exceptions import EmptyResponseError


RAW_STORY = {
    "gid": "12345",
    "text": "Looks good to me",
    "is_pinned": True,
    "created_at": "2024-03-01T10:15:30.000Z",
    "hearted": True,
    "hearts": [{"gid": "7", "name": "Ada", "resource_type": "user"}],
    "num_hearts": 1,
    "created_by": {"gid": "7", "name": "Ada", "resource_type": "user"},
    "target": {"gid": "42", "name": "Ship it", "resource_type": "task"},
    "source": "web",
    "type": "comment",
    "resource_subtype": "comment_added",
}


class TestStoryBase(unittest.TestCase):
    def test_payload_with_only_text_omits_other_fields(self):
        payload = StoryBase(text="hello").to_payload()
        self.assertEqual(payload, {"text": "hello"})
        self.assertNotIn("html_text", payload)
        self.assertNotIn("is_pinned", payload)

    def test_payload_keeps_explicit_false_pin(self):
        self.assertEqual(StoryBase(is_pinned=False).to_payload(), {"is_pinned": False})

    def test_payload_of_full_story_only_carries_content_fields(self):
        story = Story.from_raw_story(RAW_STORY)
        self.assertEqual(
            story.to_payload(),
            {"text": "Looks good to me", "is_pinned": True},
        )


class TestStory(unittest.TestCase):
    def test_decodes_wire_names(self):
        story = Story.from_raw_story(RAW_STORY)

        self.assertEqual(story.id, "12345")
        self.assertEqual(story.text, "Looks good to me")
        self.assertTrue(story.is_pinned)
        self.assertEqual(
            story.created_at,
            datetime(2024, 3, 1, 10, 15, 30, tzinfo=timezone.utc),
        )
        self.assertTrue(story.hearted)
        self.assertEqual([user.name for user in story.hearts], ["Ada"])
        self.assertEqual(story.num_hearts, 1)
        self.assertEqual(story.created_by.id, "7")
        self.assertEqual(story.target.id, "42")
        self.assertEqual(story.target.name, "Ship it")
        self.assertEqual(story.source, "web")
        self.assertTrue(story.is_comment)

    def test_system_story_is_not_a_comment(self):
        story = Story.from_raw_story({"gid": "1", "type": "system", "text": "moved"})
        self.assertFalse(story.is_comment)

    def test_missing_fields_stay_unset(self):
        story = Story.from_raw_story({"gid": "1"})
        self.assertIsNone(story.text)
        self.assertIsNone(story.created_at)
        self.assertEqual(story.hearts, [])

    def test_empty_data_raises_instead_of_empty_story(self):
        for raw_story in (None, {}, []):
            with self.subTest(raw_story=raw_story):
                with self.assertRaises(EmptyResponseError):
                    Story.from_raw_story(raw_story)


class TestPagination(unittest.TestCase):
    def test_next_page_absent(self):
        self.assertIsNone(NextPage.from_raw(None))
        self.assertIsNone(NextPage.from_raw({}))

    def test_next_page_present(self):
        next_page = NextPage.from_raw(
            {"offset": "eyJ0eXAi", "path": "/tasks/1/stories?offset=eyJ0eXAi", "uri": "https://app.asana.com/api/1.0/tasks/1/stories?offset=eyJ0eXAi"}
        )
        self.assertEqual(next_page.offset, "eyJ0eXAi")

    def test_options_to_query(self):
        options = Options(fields=["text", "html_text"], limit=10)
        self.assertEqual(
            options.to_query(),
            {"opt_fields": "text,html_text", "limit": "10"},
        )

    def test_unset_options_give_empty_query(self):
        self.assertEqual(Options().to_query(), {})

    def test_merge_later_options_win(self):
        query = Options.merge(
            Options(limit=5, pretty=True),
            None,
            Options(limit=20, offset="abc", expand=["target"]),
        )
        self.assertEqual(
            query,
            {"opt_pretty": "true", "limit": "20", "offset": "abc", "opt_expand": "target"},
        )


if __name__ == "__main__":
    unittest.main()
