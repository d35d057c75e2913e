# hapiq

Text utilities for getting from a scientific paper to the datasets it cites.

The package has three modules:

- **Identifier cleanup** (`hapiq.identifiers`) takes a raw DOI, URL or accession
  as it appears in a reference list. It strips citation notes, access dates,
  brackets and trailing punctuation from it.
- **Word segmentation** (`hapiq.segmentation`) splits text that PDF extraction
  has run together back into words. An example of such text is
  `SupplementaryinformationTheonlineversion`.
- **Markdown conversion** (`hapiq.markdown`) turns plain text extracted from a
  PDF into Markdown. It detects headers, list items and paragraphs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cleaning identifiers

```python
from hapiq.identifiers import cleanup_identifier, contains_valid_identifier

cleanup_identifier("10.5281/zenodo.4321098 (version 1.2.0, accessed March 15, 2023)")
# '10.5281/zenodo.4321098'

cleanup_identifier("https://zenodo.org/record/123456, accessed March 2023")
# 'https://zenodo.org/record/123456'

cleanup_identifier("PRJNA123456 (BioProject, whole genome sequencing)")
# 'PRJNA123456'

cleanup_identifier("[Dataset] 10.5281/zenodo.123456")
# ''  (text that starts with a bracket, parenthesis or comma is rejected)

contains_valid_identifier("see GSE12345")
# True
```

`cleanup_identifier` returns an empty string when no URL, DOI or known
accession prefix is left after cleanup. The known prefixes are PRJNA, PRJEB,
GSE, SRA, ERP and DRP.

If the text contains ©, ® or ™, the words after the identifier and any
trailing punctuation are kept.

The lower-level helpers are also public:

- `is_valid_identifier_start`
- `extract_url`
- `extract_doi`
- `handle_special_characters`

## Splitting run-together words

```python
from hapiq.segmentation import add_basic_spacing, dynamic_word_segmentation

add_basic_spacing("PeerreviewinformationNatureCommunicationsthankstheanonymousreviewers")
# 'Peer review information Nature Communications thanks the anonymous reviewers'

dynamic_word_segmentation("theonlineversion")
# 'the online version'

dynamic_word_segmentation("xyzqwerty")
# 'xyzqwerty'  (left alone when no good split exists)
```

`add_basic_spacing` works in two passes:

1. `apply_basic_patterns` inserts spaces at obvious boundaries. These are case
   changes, letters next to digits, sentence ends, and the edges of URLs and
   DOIs.
2. `segment_words` takes each remaining token of six or more characters that
   has no punctuation in it. It splits the token with a dynamic-programming
   search that favours dictionary words.

The scoring pieces are exposed as `is_valid_word`, `word_score`,
`is_scientific_term` and `is_reasonable_word`. The word lists they use are
`COMMON_WORDS` and `SCIENTIFIC_TERMS`.

## Converting extracted text to Markdown

```python
from hapiq.markdown import PDFConverter, render_document

converter = PDFConverter(preserve_layout=False, extract_headers=True)

print(converter.process_page_text("1. Introduction\nThis is a paragraph.\n\n2. Methods\nMore text."))
# ## Introduction
#
# This is a paragraph.
#
# ## Methods
#
# More text.
```

`PDFConverter` has these methods:

- `clean_text` normalises whitespace, dashes, quotes and control characters.
- `is_header`, `determine_header_level` and `clean_header_text` detect headers
  and format them.
- `is_list_item` and `format_list_item` turn bullets and lettered or
  parenthesised numbering into `- ` items. Items numbered `1.` are kept as they
  are.
- `process_page_text`, `process_paragraph` and `process_document_text` produce
  the Markdown.
- `add_basic_spacing` is a shortcut to the segmentation module.

With `preserve_layout=True`, lines are not joined into paragraphs and blank
lines are kept. The `include_pages` option is accepted and stored, but it
currently has no effect on the output.

`render_document(body, filename, converter, meta, timestamp)` builds a complete
Markdown document from text already extracted from a PDF. The document has:

- a title taken from the file name, with underscores turned into spaces and
  each word title-cased;
- a note naming the file and the conversion time (`timestamp` defaults to now);
- a "Document Metadata" section listing the non-empty entries of `meta`;
- the converted body.

It raises `ValueError` if `body` holds no readable text. `title_case` is also
available on its own.

## What it does not do

- The package does not read PDF files itself. It works on text that some
  other tool has already extracted.
- It provides no command-line program.
- It does not fetch, download or check the links and identifiers it cleans.