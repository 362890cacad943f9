"""
DearPyGui workbench for Stringity
Type or paste text, pick an operation, and inspect the result.
"""
import dearpygui.dearpygui as dpg

from common.config import load_config_document
from ui.workbench_backend import describe, operation_choices, run_workbench


def run_selected(input_box, operation_combo, profile_combo, output_box, status_text):
    operation = dpg.get_value(operation_combo)
    result = run_workbench(operation, dpg.get_value(input_box), profile=dpg.get_value(profile_combo))
    dpg.set_value(output_box, result.render())
    dpg.set_value(status_text, "OK" if result.ok else "Failed")
    if not result.ok:
        show_error(result.error)


def show_error(message):
    with dpg.window(label="Error", modal=True, no_close=False, width=400, height=120) as modal:
        dpg.add_text(message)
        dpg.add_button(label="Close", callback=lambda: dpg.delete_item(modal))
    return modal


def main():
    dpg.create_context()
    dpg.create_viewport(title='Stringity Workbench', width=720, height=560)

    # Localization-ready text
    TEXT = {
        "input": "Input text:",
        "operation": "Operation:",
        "profile": "Profile:",
        "output": "Result:",
    }
    choices = operation_choices()

    with dpg.window(label="Stringity", width=700, height=520):
        dpg.add_text(TEXT["input"])
        input_box = dpg.add_input_text(multiline=True, width=660, height=140, default_value="")

        dpg.add_text(TEXT["operation"])
        description = dpg.add_text(describe(choices[0]))
        operation_combo = dpg.add_combo(
            items=choices,
            default_value=choices[0],
            width=300,
            callback=lambda sender, value: dpg.set_value(description, describe(value)),
        )

        dpg.add_text(TEXT["profile"])
        profiles = list(load_config_document().profiles)
        profile_combo = dpg.add_combo(items=profiles, default_value=profiles[0], width=200)

        dpg.add_separator()
        dpg.add_text(TEXT["output"])
        output_box = dpg.add_input_text(multiline=True, readonly=True, width=660, height=140, default_value="")
        status_text = dpg.add_text("")
        dpg.add_button(label="Run", callback=lambda: run_selected(
            input_box,
            operation_combo,
            profile_combo,
            output_box,
            status_text,
        ))

    dpg.setup_dearpygui()
    dpg.show_viewport()
    dpg.start_dearpygui()
    dpg.destroy_context()

if __name__ == "__main__":
    main()
