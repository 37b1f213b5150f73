"""Cache a built fragment to disk as a JSON round-trip."""

from tagsmith import tag
from tagsmith.serialization import from_json, to_json

page = tag("ul", "class", "menu")[tag("li").repeat("Home", "About", "Contact")]

json_str = to_json(page)
restored = from_json(json_str)

print("Same markup:", page.render() == restored.render())
print("JSON length:", len(json_str), "chars")
