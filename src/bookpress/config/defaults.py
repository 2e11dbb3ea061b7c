"""Default configuration values."""

DEFAULT_CONFIG_YAML = """\
# bookpress configuration

metadata:
  title: null           # null: use the title found in the manuscript
  author: null

export:
  # classic-fiction, modern-business or academic
  theme: "classic-fiction"
  # 5x8, 5.25x8, 5.5x8.5, 6x9, 6.14x9.21, 6.69x9.61, 7x10, 7.5x9.25, 8x10, 8.5x11
  trim_size: "6x9"
  format: "both"        # idml, pdf or both
  include_bleed: true
  bleed_size: 0.125     # inches
  output_dir: "./output"

# Copyright page; remove the section to leave the page out
copyright:
  copyright_holder: "Author Name"
  publish_year: null
  isbn: null
  publisher_name: null
  legal_text: "All rights reserved."
  additional_credits: null

# Map Word paragraph styles to markup elements
style_map:
  heading_styles:
    "Heading 1": 1
    "Heading 2": 2
    "Heading 3": 3
  title_styles:
    - "Title"
  subtitle_styles:
    - "Subtitle"
  blockquote_styles:
    - "Quote"
    - "Intense Quote"
    - "Block Quote"
    - "Block Text"
  list_styles:
    - "List Paragraph"
    - "List Bullet"
    - "List Number"
"""
