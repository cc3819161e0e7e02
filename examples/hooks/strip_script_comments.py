"""Rewrite script bodies while formatting.

ElementBodyRewriter hands the text between <script> and </script> to a
callback and prints what it returns. Here the callback drops // comments.
"""

import re

from htmlreflow import ElementBodyRewriter, format


def strip_line_comments(body: str) -> str:
    return re.sub(r"^\s*//.*$", "", body, flags=re.MULTILINE)


html = """<script>
// my first program
console.log('hello world');
</script>
<div>   done   </div>
"""

print(format(html, transform=ElementBodyRewriter("script", strip_line_comments)))
