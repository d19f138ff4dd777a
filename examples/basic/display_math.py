"""Display math for MathJax: enable the math plugin and render."""

from patitex import Markdown

md = Markdown(plugins=["math"])

source = """
The sum of the first $n$ integers:

$$\\sum_{i=1}^{n} i = \\frac{n(n+1)}{2}$$

A determinant:

$$
\\begin{vmatrix}
a & b \\\\
c & d
\\end{vmatrix}
$$
"""

print(md(source))
