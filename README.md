# tournie

A small full-screen terminal menu for a Melee tournament setup. It is
meant for a Raspberry Pi with four push buttons wired to its GPIO pins,
but the keyboard can stand in for the buttons on any machine.

## Tabs

- **SD Card** – when opened, looks for a disk mounted under `/media`
  (found with `psutil`) and reports the Slippi Nintendont version. The
  version comes from the first `apps/*/meta.xml` whose `<name>` is
  `Slippi Nintendont`.
- **Replays** – an empty tab; it shows nothing yet.
- **Smashscope** – when opened, starts `dolphin-emu -b -e boot.dol` in the
  background with its output discarded. Leaving the tab kills the process.
- **Exit** – opening it asks for confirmation; pressing OK again quits.

## Controls

| Button | GPIO pin (BCM) | Key |
|--------|----------------|-----|
| Up     | 17             | `a` |
| Down   | 22             | `s` |
| OK     | 23             | `d` |
| Back   | 27             | `f` |

In the menu, Up and Down move between tabs and OK opens the selected one.
Inside a tab, Back closes it and returns to the menu. Other presses go to
the open tab. `q`, `Esc` or `Ctrl+C` quit at any time.

The buttons are read through the Linux sysfs GPIO interface
(`/sys/class/gpio` by default). At start-up each pin is exported and set
as an input. The pins are polled and treated as active low: a change in
level from 1 to 0 counts as a press, with a 50 ms debounce. The pins must
be pulled up externally or by the board, because the tool does not set
pull-ups. If the GPIO directory cannot be used, the buttons are ignored
and the keyboard still works.

## Installation

```
pip install .
```

## Running

```
tournie
tournie --gpio-root /sys/class/gpio
```

`--gpio-root` selects the sysfs GPIO directory. The Smashscope tab needs
`dolphin-emu` on your `PATH` and a `boot.dol` in the working directory.

## Library use

The pieces can be used on their own:

- `tournie.disk.SDHandler.find_sd(media_root)` and
  `SDHandler.slippi_version()` find the card and read the version.
- `tournie.event.EventHandler` gathers ticks, key presses, button presses
  and application events into one queue. Read the queue with `next(timeout)`.
- `tournie.app.App` runs the menu state machine over any list of
  `tournie.tabs.TabWidget` objects.
- `tournie.ui.render(app, term)` returns one frame as terminal output.

## What it does not do

- The Replays tab has no function yet.
- Only the sysfs GPIO interface is supported. On kernels without it, only
  the keyboard controls work.

## Development

```
pip install -e ".[test]"
pytest
```