# docxsite

A small web server that renders one documentation-style HTML page. The page
is built from a few components: a greeting bar, a content section and a
footer. Each component uses scoped CSS classes. A class's name is its base
name followed by a short hash of its declarations, such as `flex_xxxx`. The
style rule for each class is emitted only once per page.

It needs only the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
docxsite
```

Options:

- `--host ADDRESS`: the address to bind to. By default it binds to all
  addresses.
- `--port PORT`: the port to listen on. The default is 8080.

The server answers `GET` and `HEAD` on every path with the rendered page, as
`text/html; charset=utf-8`. It answers `POST` with `405 Method Not Allowed`
and an `Allow: GET, HEAD` header. It logs a line when it starts listening and
stops cleanly on Ctrl-C. If it cannot bind to the address, it logs the error
and exits with status 1.

## Using it as a library

```python
from docxsite.components import render_page

html = render_page("GoProject")
```

`render_page` returns the complete HTML document for the given title, and it
HTML-escapes the title.

The building blocks are in two modules:

- `docxsite.styles`
  - `CSSClass`: a name plus declarations, with `id` and `rule` properties.
  - The predefined classes `flex`, `col`, `sleeve`, `text_color`, `spacing`
    and `footerbox`.
  - `css_id`, `class_names`, and `StyleTracker`. `StyleTracker.render`
    returns a `<style>` element holding only the classes it has not emitted
    yet.
- `docxsite.components`
  - `greeting`, `content`, `footer` and `base`. Each takes a
    `StyleTracker`, and `base` also takes a title.

To embed the server in your own code:

```python
from docxsite.server import make_server

with make_server("127.0.0.1", 8080) as httpd:
    httpd.serve_forever()
```

`docxsite.server.list_all_data()` returns the page that the server sends,
titled "GoProject".

The package also ships sample records:

- `docxsite.data.all_data()` returns a list of `Information` items, each with
  a `name` and a `description`.
- `docxsite.data.doc_subjects()` returns a list of `ContentModel` items, each
  with a `title` and a `paragraph`.

## What it does not do

The page is fixed. The sample records in `docxsite.data` are not shown on it,
and the text in the content section is a placeholder. There is only the one
page: every path returns the same document. The server has no static files,
no storage and no other routes.