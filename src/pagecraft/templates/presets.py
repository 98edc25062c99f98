"""Built-in templates written to the registry on first run."""

from typing import Any

BLANK_TEMPLATE_ID = "template-1"
LANDING_PAGE_TEMPLATE_ID = "template-2"

SEED_TEMPLATES: tuple[dict[str, Any], ...] = (
    {
        "id": BLANK_TEMPLATE_ID,
        "name": "Blank Template",
        "components": [],
    },
    {
        "id": LANDING_PAGE_TEMPLATE_ID,
        "name": "Simple Landing Page",
        "components": [
            {
                "id": "header-1",
                "type": "header",
                "content": "Welcome to my landing page",
                "classes": "text-4xl font-bold text-center py-8 bg-blue-500 text-white",
                "customStyles": {
                    "backgroundColor": "#3B82F6",
                    "color": "#FFFFFF",
                    "padding": "32px",
                    "textAlign": "center",
                    "fontSize": "36px",
                    "fontWeight": "bold",
                },
            },
            {
                "id": "hero-1",
                "type": "hero",
                "heading": "Amazing Product",
                "subheading": "The best product you will ever use",
                "content": (
                    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed euismod, nisl vel "
                    "ultricies lacinia, nisl nisl aliquam nisl, eu aliquam nisl nisl eu nisl."
                ),
                "imageUrl": "https://via.placeholder.com/600x400",
                "classes": "flex flex-col md:flex-row items-center justify-between gap-8 py-16 px-4",
                "customStyles": {
                    "padding": "64px",
                    "display": "flex",
                    "flexDirection": "column",
                },
            },
            {
                "id": "features-1",
                "type": "features",
                "items": [
                    {"title": "Feature 1", "description": "Description of feature 1"},
                    {"title": "Feature 2", "description": "Description of feature 2"},
                    {"title": "Feature 3", "description": "Description of feature 3"},
                ],
                "classes": "grid grid-cols-1 md:grid-cols-3 gap-8 py-16 px-4",
                "customStyles": {
                    "padding": "64px",
                    "display": "grid",
                    "gridTemplateColumns": "repeat(3, 1fr)",
                    "gap": "32px",
                },
            },
            {
                "id": "cta-1",
                "type": "cta",
                "heading": "Ready to get started?",
                "buttonText": "Sign Up Now",
                "classes": "text-center py-16 bg-gray-100",
                "customStyles": {
                    "padding": "64px",
                    "textAlign": "center",
                    "backgroundColor": "#F3F4F6",
                },
            },
        ],
    },
)
