"""Cache parsed AST to disk as a JSON round-trip.

Math blocks store offsets into the source, so keep the source next to the
cached JSON to render it again.
"""

from patitex import Markdown
from patitex.serialization import from_json, to_json

md = Markdown(plugins=["math"])
source = "# Cached document\n\n$$\n\\int_0^1 x\\,dx\n$$"
doc = md.parse(source)

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
print(md.render(restored, source=source))
