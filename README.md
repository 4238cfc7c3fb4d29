# cubenceline

The interactive state behind a terminal configurator for a Claude Code
status line: colour picker, icon selector, name and separator dialogs, the
start-up menu, key-binding help and screen layout. Every piece is plain
Python with no drawing library and no runtime dependencies, so it can be
driven and tested on its own.

## Modules

- `cubenceline.events` – `AppEvent` and `handle_key_event(key)`. Single
  characters match exactly (`"q"` quit, `"s"` save, `" "` toggle, `"c"`
  colour picker, `"i"` icon selector); longer strings are key names
  (`"up"`, `"down"`, `"enter"`, `"tab"`) matched without regard to case.
  Anything else gives `AppEvent.UNKNOWN`.
- `cubenceline.layout` – the frozen `Rect(x, y, width, height)` (negative
  values raise `ValueError`), `main_layout(area)` splitting into title,
  preview, style selector, content and help rows (three lines each, content
  at least ten), and `content_layout(area)` splitting 30 % segment list /
  70 % settings.
- `cubenceline.colors` – `Color16`, `Color256` and `RgbColor` (components
  outside 0–255 raise `ValueError`), `color_name(index)` for the sixteen
  basic colours (`"Unknown"` otherwise), and `centered_rect(percent_x,
  percent_y, area)` for placing popups.
- `cubenceline.color_picker` – `ColorPicker` with modes `ColorPickerMode.BASIC16`,
  `EXTENDED256` and `RGB_INPUT`. `move_selection(delta)` moves linearly and
  clamps; `move_direction(NavDirection)` moves through the grid, wrapping at
  the ends with left/right. `fit_basic_grid(width)` and
  `fit_extended_grid(width)` set the column count used for up/down. In RGB
  mode `input_char` accepts up to three digits per R/G/B field and six hex
  digits (upper-cased); a full hex value takes precedence. `selected_color`
  and `preview_text()` report the current choice.
- `cubenceline.icon_selector` – `IconSelector` over `plain_icons()` (emoji)
  and `nerd_font_icons()`, each an `IconInfo(icon, name)`. `open(style_mode)`
  takes `"plain"`, `"nerd_font"` or `"powerline"` (or an enum with such a
  value); `toggle_style`, `move_selection`, custom text entry with
  `start_custom_input` / `input_char` / `finish_custom_input`, and
  `scroll_offset(view_height)` keeping the selection visible.
- `cubenceline.name_input` – `NameInput`, accepting ASCII letters, digits,
  `_` and `-`; `result()` returns the trimmed name or `None`, and
  `popup_area(area)` places the dialog clear of the help rows.
- `cubenceline.separator_editor` – `SeparatorEditor` with the presets from
  `default_presets()` (Pipe, Thin, Arrow, Space, Dot). Opening on a value
  marks the matching preset; typing clears the mark;
  `move_preset_selection(delta)` picks a preset and `preset_lines()` lists them.
- `cubenceline.editor` – `SegmentEditor`, remembering which segment is being
  edited.
- `cubenceline.help` – `help_items(color_picker_open, icon_selector_open)`,
  `wrap_help(items, width)` which never splits a shortcut across lines, and
  `help_lines(width, status_message, ...)` giving the text of the help box.
- `cubenceline.main_menu` – `MainMenu` and `MenuResult`. `handle_key(key)`
  moves with `"up"`/`"down"`, returns a result on `"enter"`, and returns
  `MenuResult.EXIT` on `"esc"` or `"q"`. Choosing *About* raises
  `show_about` and also returns `MenuResult.EXIT`; while `show_about` is set,
  the next key only clears it. `items`, `header_lines()` and `about_lines()`
  give the menu's text.
- `cubenceline.settings` – `describe_color(color, default)` (e.g.
  `"Light Red"`, `"256:42"`, `"RGB(1,2,3)"`) and `terminal_color(color)`
  giving a name, palette index or `(r, g, b)` tuple, white when unset.

## Example

```python
from cubenceline.name_input import NameInput
from cubenceline.separator_editor import SeparatorEditor
from cubenceline.color_picker import ColorPicker

dialog = NameInput()
dialog.open("Save Theme", "Enter theme name...")
for ch in "my theme!":
    dialog.input_char(ch)     # space and "!" are rejected
print(dialog.result())        # "mytheme"

editor = SeparatorEditor()
editor.open(" | ")            # marks the "Pipe" preset
editor.move_preset_selection(1)
print(editor.separator)       # " │ "
print(editor.preset_lines())

picker = ColorPicker()
picker.open()
picker.cycle_mode()           # basic -> extended 256
picker.move_selection(5)
print(picker.preview_text())  # "████ Color 256: 5"
```

## What it does not do

The package holds state and computes text and layout only. It does not draw
to a terminal or read key presses itself, has no command to run, does not
load or save configuration files or themes, and does not generate the
status line or its preview. Those are left to whatever application drives
these pieces.

## Tests

Install the `test` extra and run `pytest`.