"""Parse 1000 math documents in parallel with one shared instance."""

from concurrent.futures import ThreadPoolExecutor

from patitex import Markdown

md = Markdown(plugins=["math"])
docs = ["$$\nx_" + str(i) + "\n$$\n\nDocument " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md.parse, docs))

print(f"Parsed {len(results)} documents in parallel")
print("First doc content:", results[0].children[0].get_content(docs[0]).strip())
