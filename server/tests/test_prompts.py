"""Tests for UI prompt construction."""

from uigen.core.prompts import build_ui_prompt
from uigen.models import GenerationOptions


class TestBuildUiPrompt:
    def test_includes_idea_and_requirements(self) -> None:
        opts = GenerationOptions(app_idea="issue tracker")
        prompt = build_ui_prompt(opts.app_idea, opts)
        assert "APPLICATION IDEA: issue tracker" in prompt
        assert "'use client'" in prompt
        assert "useFuyouStore" in prompt
        assert "onClick" in prompt
        assert "export default function GeneratedUI()" in prompt
        assert "Return ONLY the complete TypeScript React component code" in prompt

    def test_theme_is_used(self) -> None:
        opts = GenerationOptions(app_idea="notes", theme="minimal")
        assert "minimal theme" in build_ui_prompt(opts.app_idea, opts)

    def test_features_are_listed_in_order(self) -> None:
        opts = GenerationOptions(app_idea="todo", features=["labels", "due dates"])
        prompt = build_ui_prompt(opts.app_idea, opts)
        assert "- labels\n- due dates" in prompt

    def test_empty_idea_still_produces_prompt(self) -> None:
        prompt = build_ui_prompt("", None)
        assert "APPLICATION IDEA: A general-purpose web application" in prompt
        assert "modern theme" in prompt

    def test_deterministic(self) -> None:
        opts = GenerationOptions(app_idea="shop", theme="professional", features=["cart"])
        assert build_ui_prompt("shop", opts) == build_ui_prompt("shop", opts)
