"""HTML output renderer."""

import html

import markdown as md


def render(markdown_text: str, title: str = "Slack message") -> str:
    """Render converted Markdown as a standalone HTML page."""
    body: str = md.markdown(markdown_text, extensions=["extra"])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            max-width: 800px;
            margin: 0 auto;
            padding: 2rem;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            line-height: 1.5;
            color: #1d1c1d;
        }}
        code {{
            background: #f6f6f6;
            border: 1px solid #ddd;
            border-radius: 3px;
            padding: 0 0.2em;
        }}
        pre {{ background: #f6f6f6; padding: 0.5rem; }}
        blockquote {{
            border-left: 4px solid #ddd;
            padding-left: 1rem;
            margin: 0.5rem 0;
        }}
        a {{ color: #1264a3; }}
    </style>
</head>
<body>
{body}
</body>
</html>"""
