# hyfetcher

hyfetcher downloads lists of web pages for offline reading. It saves each page
together with the images and videos it uses. It then writes an `index.html`
that lists every saved page in a tree, one branch per directory of your input.

## Installation

```
pip install .
```

## Preparing the input

Put CSV files under a data directory. Each CSV file (UTF-8, a leading byte
order mark is allowed) starts with a header row. Every record after it holds a
URL in the first column and a title in the second. Blank lines, records whose
number of fields differs from the header's, and records with an empty URL or
title are skipped. Directories and files are read in sorted order.

```
data/
  blog/
    2024/
      spring.csv
  docs/
    guides.csv
```

The first directory under `data/` is the category. Any directories below it,
and the CSV file's name without `.csv`, become nested sections of the index and
of the output tree.

A page titled `Hello: World` from `data/blog/2024/spring.csv` is saved as:

```
outputs/blog/2024/spring/Hello_ World.html
```

The characters `< > : " / \ | ? *` in titles are replaced with `_`
(`hyfetcher.model.sanitize_filename`).

## Running

```
hyfetcher --data-dir data --outputs-dir outputs --concurrency 8
```

| Option | Short | Default | Meaning |
|---|---|---|---|
| `--data-dir` | `-d` | `data` | Directory to read CSV files from |
| `--outputs-dir` | `-o` | `outputs` | Directory to write pages and the index to |
| `--concurrency` | `-c` | `8` | How many pages to download at once (at least 1) |

Requests follow redirects and send the user agent
`Mozilla/5.0 (compatible; HyFetcher/1.0)`.

A page whose output file already exists is skipped, so an interrupted run can
be started again. The page body is saved whatever the HTTP status of the
response. Images from `<img src>` are stored in an `images/` folder next to
each saved page, and videos from `<video src>` and `<source src>` go into
`videos/`. Relative sources are resolved against the page URL. Each file is
named after the last `/`-separated part of its URL (`image.jpg` or `video.mp4`
when that part is empty). A media file that already exists is not fetched
again, and a response with an unsuccessful status leaves no file behind. The
page's `src="..."` attributes are rewritten to point at the local copies.

A network or file error on one page is reported on stderr and the run
continues with the others. When every page has been processed,
`outputs/index.html` links to each saved copy and to its original URL. The
command exits with status 1 if the index cannot be written, for example when
no page was saved and the output directory does not exist.

## Using it from Python

```python
from pathlib import Path

from hyfetcher.csv_parser import parse_posts
from hyfetcher.index_builder import build_index_tree, render_index_html, write_index_html

posts = parse_posts(Path("data"))
tree = build_index_tree(posts)
html = render_index_html(tree)          # the index page as a string
write_index_html(tree, Path("outputs")) # writes outputs/index.html
```

- `hyfetcher.model.Post` holds a post's `url`, `title`, `category`,
  `csv_subdir` and `csv_filename`; `rel_save_path` gives its output path.
- `hyfetcher.index_builder.render_index_html(tree, generated)` takes an
  optional `datetime` for the page's timestamp; it defaults to the current
  local time. `write_index_html` needs `outputs_dir` to exist already.
- `hyfetcher.downloader.download_and_save_post(post, outputs_dir, client)`
  fetches a single page with an `httpx.AsyncClient`. It returns `False` if the
  page was already saved and `True` once it is written.
- `hyfetcher.image.process_images` and `hyfetcher.video.process_videos`
  localise the media of an HTML string on their own.
- `hyfetcher.cli.run(data_dir, outputs_dir, concurrency)` is a coroutine that
  runs the whole download and indexing process and returns the index path.

## What it does not do

- It does not run JavaScript; pages are saved as the server sends them.
- Only `src` attributes of `<img>`, `<video>` and `<source>` are localised.
  Stylesheets, scripts, `srcset` and CSS backgrounds still point at the web.
- Titles and URLs are written into the index as they are, without HTML
  escaping.

## Running the tests

```
pip install ".[test]"
pytest
```