"""Editor preview loop — apply an edit, re-parse, show HTML and stats."""

from inkdown import Markdown, ParseConfig
from inkdown.incremental import ContentChange, Position, apply_changes

md = Markdown(config=ParseConfig(images=False), escape=True)

source = "# Notes\n- first\n- second\n\n| a | b |\n| - | - |\n| 1 | 2 |"
print(md.parse_result(source).html)

# User types " item" after "first"
offset = source.index("first") + len("first")
here = Position(line=1, column=len("- first"), offset=offset)
change = ContentChange(start=here, end=here, text=" item")
source = apply_changes(source, [change])

result = md.parse_incremental(source, [change])
print(result.html)
print("words:", result.meta.word_count, "lists:", result.meta.statistics.lists)
print("features:", ", ".join(md.supported_features()))
