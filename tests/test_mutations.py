"""Tests for pure document mutation operations."""

from __future__ import annotations

import pytest

from resume_studio.models import (
    DEFAULT_SECTION_TITLES,
    ItemListSection,
    SectionType,
    SkillsSection,
    SummarySection,
    WorkExperience,
    default_document,
    encode_document,
)
from resume_studio.services.mutations import (
    ContentTypeError,
    Direction,
    add_section,
    change_contact_field,
    change_field,
    change_section_content,
    change_section_title,
    delete_section,
    move_section,
    new_section_id,
)


def _ids(document) -> list[str]:
    return [section.id for section in document.sections]


class TestMoveSection:
    def test_move_first_up_is_noop(self) -> None:
        doc = default_document()

        assert move_section(doc, 0, Direction.UP) is doc

    def test_move_last_down_is_noop(self) -> None:
        doc = default_document()

        assert move_section(doc, len(doc.sections) - 1, Direction.DOWN) is doc

    def test_out_of_range_index_is_noop(self) -> None:
        doc = default_document()

        assert move_section(doc, 17, "up") is doc
        assert move_section(doc, -1, "down") is doc

    def test_swap_with_neighbour(self) -> None:
        doc = default_document()

        moved = move_section(doc, 2, Direction.UP)

        assert _ids(moved) == ["summary", "education", "experience", "projects", "skills"]
        assert _ids(doc) == ["summary", "experience", "education", "projects", "skills"]

    def test_move_down_accepts_string_direction(self) -> None:
        moved = move_section(default_document(), 0, "down")

        assert _ids(moved)[:2] == ["experience", "summary"]


class TestDeleteSection:
    def test_delete_removes_only_that_section(self) -> None:
        doc = default_document()

        result = delete_section(doc, "education")

        assert _ids(result) == ["summary", "experience", "projects", "skills"]
        assert result.sections[0] is doc.sections[0]

    def test_unknown_id_is_noop(self) -> None:
        doc = default_document()

        assert delete_section(doc, "missing") is doc

    def test_protected_section_is_not_guarded_here(self) -> None:
        result = delete_section(default_document(), "summary")

        assert "summary" not in _ids(result)


class TestAddSection:
    def test_add_skills_section(self) -> None:
        doc = delete_section(default_document(), "skills")

        result = add_section(doc, SectionType.SKILLS, id_factory=lambda _: "skills-1")

        added = result.sections[-1]
        assert isinstance(added, SkillsSection)
        assert added.id == "skills-1"
        assert added.title == "Skills"
        assert added.content == {}
        assert added.is_deletable is True

    def test_generated_id_format(self) -> None:
        result = add_section(default_document(), "awards")

        added = result.sections[-1]
        assert isinstance(added, ItemListSection)
        assert added.type == "awards"
        assert added.id.startswith("awards-")
        assert len(added.id) == len("awards-") + 8
        assert added.title == DEFAULT_SECTION_TITLES[SectionType.AWARDS]

    def test_colliding_id_is_regenerated(self) -> None:
        doc = default_document()

        result = add_section(doc, SectionType.PROJECTS, id_factory=lambda _: "projects")

        assert len(set(_ids(result))) == len(result.sections) == 6

    def test_second_summary_is_noop(self) -> None:
        doc = default_document()

        assert add_section(doc, SectionType.SUMMARY) is doc

    def test_summary_added_when_missing(self) -> None:
        doc = delete_section(default_document(), "summary")

        result = add_section(doc, "summary")

        summary = result.sections[-1]
        assert isinstance(summary, SummarySection)
        assert summary.id == "summary"
        assert summary.is_deletable is False
        assert summary.title == "Professional Summary"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError):
            add_section(default_document(), "hobbies")

    def test_new_section_id(self) -> None:
        assert new_section_id("volunteer").startswith("volunteer-")
        assert new_section_id("custom") != new_section_id("custom")


class TestChangeSectionContent:
    def test_replace_summary_text(self) -> None:
        doc = default_document()

        result = change_section_content(doc, "summary", "Builds things.")

        assert result.find_section("summary").content == "Builds things."
        assert doc.find_section("summary").content != "Builds things."

    def test_accepts_dict_entries_for_list_sections(self) -> None:
        result = change_section_content(
            default_document(),
            "experience",
            [{"id": "w", "company": "Acme", "role": "Dev", "duration": "2024"}],
        )

        entries = result.find_section("experience").content
        assert entries == [WorkExperience(id="w", company="Acme", role="Dev", duration="2024")]

    def test_mismatched_content_raises(self) -> None:
        doc = default_document()

        with pytest.raises(ContentTypeError):
            change_section_content(doc, "skills", [{"id": "x", "name": "Oops"}])

    @pytest.mark.parametrize(
        "skills",
        [{"Languages": ["Python", "python"]}, {"Languages": []}],
        ids=["duplicate-ignoring-case", "empty-category"],
    )
    def test_invalid_skill_map_raises(self, skills: dict[str, list[str]]) -> None:
        with pytest.raises(ContentTypeError):
            change_section_content(default_document(), "skills", skills)

    def test_summary_rejects_list(self) -> None:
        with pytest.raises(ContentTypeError):
            change_section_content(default_document(), "summary", ["not", "text"])

    def test_content_type_error_is_value_error(self) -> None:
        assert issubclass(ContentTypeError, ValueError)

    def test_unknown_id_is_noop(self) -> None:
        doc = default_document()

        assert change_section_content(doc, "missing", "text") is doc


class TestTitleAndFields:
    def test_change_section_title(self) -> None:
        result = change_section_title(default_document(), "projects", "Side Projects")

        assert result.find_section("projects").title == "Side Projects"

    def test_change_title_unknown_id_is_noop(self) -> None:
        doc = default_document()

        assert change_section_title(doc, "missing", "X") is doc

    def test_change_contact_field(self) -> None:
        result = change_contact_field(default_document(), "phone", "555-0100")

        assert result.contact.phone == "555-0100"
        assert result.contact.email == "jane.doe@email.com"

    def test_change_contact_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            change_contact_field(default_document(), "fax", "1")

    def test_change_field(self) -> None:
        result = change_field(default_document(), "title", "Staff Engineer")

        assert result.title == "Staff Engineer"
        assert result.name == "Jane Doe"

    def test_change_field_rejects_sections(self) -> None:
        with pytest.raises(ValueError):
            change_field(default_document(), "sections", "[]")

    def test_input_document_encoding_unchanged(self) -> None:
        doc = default_document()
        before = encode_document(doc)

        change_field(doc, "name", "Someone Else")
        change_section_content(doc, "skills", {"Languages": ["Python"]})
        delete_section(doc, "projects")

        assert encode_document(doc) == before
