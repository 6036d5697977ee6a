"""
Component archive export.

Packages the generated markup and stylesheet into a zip with a short usage note.
"""

import io
import zipfile
from typing import Optional

from playground.core.exceptions import ValidationError

ARCHIVE_FILENAME = "component.zip"
COMPONENT_FILENAME = "Component.tsx"
STYLESHEET_FILENAME = "Component.css"
README_FILENAME = "README.md"

README_TEMPLATE = """# Generated Component

This component was generated using AI Playground.

## Usage

```jsx
import Component from './Component';
import './Component.css';

function App() {
  return <Component />;
}
```
"""


def prepare_component_source(markup: str) -> str:
    """Append a default export when the markup does not declare one."""
    if "export default" in markup:
        return markup
    return f"{markup}\n\nexport default Component;"


def build_component_archive(markup: Optional[str], style: Optional[str]) -> bytes:
    """
    Build the zip archive for a session's generated code.

    Raises:
        ValidationError: If there is no markup and no stylesheet
    """
    if not markup and not style:
        raise ValidationError("No code to download")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        if markup:
            archive.writestr(COMPONENT_FILENAME, prepare_component_source(markup))
        if style:
            archive.writestr(STYLESHEET_FILENAME, style)
        archive.writestr(README_FILENAME, README_TEMPLATE)
    return buffer.getvalue()
