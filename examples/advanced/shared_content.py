"""One node, several parents: later edits show up everywhere."""

import io

from tagsmith import tag

status = tag("span", "class", "status")["loading"]
header = tag("header")["Status: ", status]
footer = tag("footer")[status]

status.set_text("ready")
print(header)
print(footer)

# clone() when the copies should diverge
frozen = footer.clone()
status.set_text("offline")
print(footer, frozen)

out = io.BytesIO()
header.stream_bytes(out, "ascii")
header.stream_bytes(out, "ascii")
print(out.getvalue())
