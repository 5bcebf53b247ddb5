"""Basic example: drive a picker session without any UI."""

from chromapick import PickerSession, PickerTab
from chromapick.colors import find_swatch, spectrum_cell
from chromapick.core import PickerState


def main():
    """Walk through each input method and print what the host receives."""

    received = []

    def on_color_change(hex_value: str) -> None:
        received.append(hex_value)
        print(f"  host <- {hex_value}")

    session = PickerSession("#007AFF", on_color_change=on_color_change)
    print(f"Seeded with {session.hex} (preset: {session.selected_preset.name})\n")

    session.open()

    print("Grid tab: picking Orange")
    session.select_preset(find_swatch("Orange"))

    print("\nSpectrum tab: hue 210, 80% saturation")
    session.select_tab(PickerTab.SPECTRUM)
    session.select_spectrum_cell(spectrum_cell(7, 2))

    print("\nSliders tab: typing channel values")
    session.select_tab(PickerTab.SLIDERS)
    for channel, raw in (("r", "255"), ("g", "300"), ("b", "oops")):
        session.edit_channel(channel, raw)

    print("\nHex entry: typing one character at a time")
    for i in range(1, 8):
        text = "#3B82F6"[:i]
        accepted = session.edit_hex_buffer(text)
        print(f"  buffer={text!r:<10} accepted={accepted}")

    session.close()

    state: PickerState = session.state
    print(f"\nFinal color {state.hex} after {len(received)} notifications")


if __name__ == "__main__":
    main()
