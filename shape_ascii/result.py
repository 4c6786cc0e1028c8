"""
ASCII Art Result Container

Provides the ASCIIResult dataclass for storing and displaying rendered
art, with support for terminal display, HTML export, and file saving.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from datetime import datetime
import html


@dataclass
class ASCIIResult:
    """
    Container for a shape-vector render.

    Attributes:
        text: The rendered ASCII art string
        metadata: Render parameters (mode, grid size, contrast, timing)
    """
    text: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self):
        return self.text.split('\n')

    @property
    def width(self) -> int:
        """Width in characters."""
        return max(len(line) for line in self.lines)

    @property
    def height(self) -> int:
        """Height in lines."""
        return len(self.lines)

    def display(self, max_width: Optional[int] = None):
        """
        Print the ASCII art to the terminal.

        Args:
            max_width: Maximum width to display (truncates if needed)
        """
        if max_width:
            for line in self.lines:
                print(line[:max_width])
        else:
            print(self.text)

    def save(self, path: str, format: str = "auto"):
        """
        Save ASCII art to a file.

        Args:
            path: Output file path
            format: "txt", "html", or "auto" (detect from extension)
        """
        if format == "auto":
            format = "html" if path.endswith(('.html', '.htm')) else "txt"

        content = self.to_html() if format == "html" else self.text + '\n'

        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

    def to_html(
        self,
        font_family: str = "Menlo, Monaco, 'Courier New', monospace",
        font_size: str = "10px",
        bg_color: str = "#1e1e1e",
        fg_color: str = "#d4d4d4",
        title: str = "ASCII Art",
    ) -> str:
        """
        Convert ASCII art to a styled HTML page.

        Returns:
            Complete HTML document string
        """
        escaped_text = html.escape(self.text)

        meta_html = ""
        if self.metadata:
            meta_items = ''.join(
                f"<li><strong>{html.escape(str(key))}:</strong> {html.escape(str(value))}</li>"
                for key, value in self.metadata.items()
            )
            meta_html = f"""
        <div class="metadata">
            <h3>Render Details</h3>
            <ul>{meta_items}</ul>
        </div>
"""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            background-color: {bg_color};
            color: {fg_color};
            font-family: {font_family};
            font-size: {font_size};
            line-height: 1.2;
            padding: 20px;
            margin: 0;
        }}
        pre {{
            margin: 0;
            white-space: pre;
        }}
        .metadata {{
            margin-top: 20px;
            padding-top: 20px;
            border-top: 1px solid #444;
            font-size: 12px;
        }}
    </style>
</head>
<body>
    <pre>{escaped_text}</pre>
{meta_html}
</body>
</html>"""

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the ASCII art."""
        body = self.text.replace('\n', '')
        return {
            'width': self.width,
            'height': self.height,
            'total_characters': len(body),
            'unique_characters': len(set(body)),
            'blank_ratio': body.count(' ') / len(body) if body else 0.0,
        }

    def __repr__(self) -> str:
        return f"ASCIIResult(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return self.text


def create_result(
    text: str,
    mode: Optional[str] = None,
    library: Optional[str] = None,
    **extra_metadata
) -> ASCIIResult:
    """
    Factory function to create an ASCIIResult with standard metadata.

    Args:
        text: ASCII art string
        mode: Source of the pixels ("image", "text" or "demo")
        library: Shape library used
        **extra_metadata: Additional metadata

    Returns:
        Configured ASCIIResult
    """
    metadata = {
        'generated_at': datetime.now().isoformat(),
    }

    if mode:
        metadata['mode'] = mode
    if library:
        metadata['library'] = library

    metadata.update(extra_metadata)

    return ASCIIResult(text=text, metadata=metadata)
