"""Format a messy HTML snippet with the default settings."""

from htmlreflow import format

html = """<body>
      <main   class="page"id="top">
<h1>Hello   world</h1>
<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt.</p>
<pre>  keep   this  </pre>
   </main>


</body>
"""

print(format(html))
