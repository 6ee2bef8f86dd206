# uigen/core/prompts.py
"""
Prompts used by the UI generation pipeline.

Goals:
- Ask for a single Next.js App Router client component and nothing else.
- Pin the component vocabulary (shadcn/ui + Lucide) and the store hook so the
  saved artifact passes the marker validation.
"""

from typing import Any, Optional

from uigen.utils.config import STORE_HOOK, STORE_MODULE

UI_COMPONENTS = [
    "Button",
    "Card",
    "CardContent",
    "CardDescription",
    "CardHeader",
    "CardTitle",
    "Badge",
]

THEME_STYLES = {
    "modern": "gradient backgrounds, rounded cards, soft shadows and bold headings",
    "minimal": "generous whitespace, a neutral palette, thin borders and restrained accents",
    "professional": "a sober blue/gray palette, clear hierarchy and compact data displays",
}
DEFAULT_THEME = "modern"


def _feature_lines(features: Any) -> str:
    items = [str(f).strip() for f in (features or []) if str(f).strip()]
    if not items:
        return "- Infer the primary features from the application idea"
    return "\n".join(f"- {f}" for f in items)


def build_ui_prompt(app_idea: Optional[str], options: Any = None) -> str:
    """
    Build the instruction text for a single GeneratedUI component.
    Pure string construction: tolerates an empty idea, missing options and
    unknown themes.
    """
    theme = getattr(options, "theme", None) or DEFAULT_THEME
    features = getattr(options, "features", None) or ()
    style = THEME_STYLES.get(theme, THEME_STYLES[DEFAULT_THEME])
    idea = (app_idea or "").strip() or "A general-purpose web application"

    prompt_lines = [
        "Generate a complete Next.js 14 App Router React component for the following application idea:",
        "",
        f"APPLICATION IDEA: {idea}",
        "",
        "REQUESTED FEATURES:",
        _feature_lines(features),
        "",
        "REQUIREMENTS:",
        "1. Start the file with the 'use client' directive",
        f"2. Import and use shadcn/ui components from '@/components/ui/*': {', '.join(UI_COMPONENTS)}",
        "3. Import appropriate Lucide React icons ('lucide-react') based on the app idea",
        f"4. Use Tailwind CSS for styling with a {theme} theme: {style}",
        f"5. Import {STORE_HOOK} from '{STORE_MODULE}' and display its state",
        "6. Export the component as: export default function GeneratedUI()",
        "",
        "DYNAMIC UI STRUCTURE:",
        "- Hero section with a compelling headline based on the app",
        "- Display key data/metrics from the store",
        "- Action buttons that match the app's primary functions",
        "- Feature cards showcasing the app's value propositions",
        "- Final CTA section encouraging user engagement",
        "",
        "FUNCTIONALITY:",
        "- Create onClick handlers appropriate to the application",
        f"- Wire every handler to {STORE_HOOK} actions",
        "- Include console.log statements for debugging",
        "- Make API calls to appropriate endpoints with loading and error handling",
        "",
        "OUTPUT REQUIREMENTS:",
        "- Return ONLY the complete TypeScript React component code",
        "- Include all imports at the top",
        "- No explanations before or after the code",
        "- Code should work immediately without modifications",
        "",
        "Generate the complete component now:",
    ]
    return "\n".join(prompt_lines)
