"""Build and render markup in a few lines, no config and no deps."""

from tagsmith import tag

page = tag("div", "class", "glass")[
    tag("h1")["Hello"],
    tag("p")["This is the ", tag("i")["full"], " content"],
    tag("br/"),
]
print(page)
print(page.to_plain_text("h1"))
