import logging

import gradio as gr

from text_formatter.config import DEFAULT_CONFIG
from text_formatter.handlers_history import clear_history_handler, render_history
from text_formatter.handlers_json import JSON_MODE_CHOICES, process_json, process_json_debounced, reset_json
from text_formatter.handlers_sql import (
    SQL_CASE_CHOICES,
    SQL_STYLE_CHOICES,
    process_sql,
    process_sql_debounced,
    reset_sql,
)
from text_formatter.handlers_xml import XML_INDENT_CHOICES, process_xml, process_xml_debounced, reset_xml
from text_formatter.logging_utils import setup_logging
from text_formatter.stats import text_stats

# Debounced listeners overlap; a newer keystroke supersedes a sleeping one.
LIVE_PREVIEW = dict(concurrency_limit=None, trigger_mode="multiple")

# --- UI Definition ---
with gr.Blocks(title="Text Formatter") as demo:
    gr.Markdown("# SQL / XML / JSON Formatter")
    gr.Markdown("Paste text on the left; the formatted result appears on the right as you type.")

    # State
    history_state = gr.State(value=[])

    with gr.Tab("SQL"):
        with gr.Row():
            with gr.Column(scale=1):
                sql_input = gr.Textbox(
                    label="SQL or source code",
                    lines=16,
                    placeholder="'SELECT *' +\n'FROM users'",
                )
                sql_input_stats = gr.Markdown(text_stats(""))
            with gr.Column(scale=1):
                sql_output = gr.Textbox(label="Formatted SQL", lines=16, interactive=False, show_copy_button=True)
                sql_output_stats = gr.Markdown(text_stats(""))

        with gr.Row():
            format_style = gr.Dropdown(label="Format", choices=SQL_STYLE_CHOICES, value="readable")
            case_style = gr.Dropdown(label="Case", choices=SQL_CASE_CHOICES, value="normal")
            sql_reset_btn = gr.Button("Reset")
        sql_status = gr.Textbox(label="Status", interactive=False)

        sql_inputs = [sql_input, format_style, case_style, history_state]
        sql_outputs = [sql_output, sql_status, sql_output_stats, history_state]

        sql_input.input(fn=text_stats, inputs=[sql_input], outputs=[sql_input_stats])
        sql_input.input(fn=process_sql_debounced, inputs=sql_inputs, outputs=sql_outputs, **LIVE_PREVIEW)
        format_style.change(fn=process_sql, inputs=sql_inputs, outputs=sql_outputs)
        case_style.change(fn=process_sql, inputs=sql_inputs, outputs=sql_outputs)

        sql_reset_btn.click(
            fn=reset_sql,
            outputs=[sql_input, sql_output, format_style, case_style, sql_status, sql_input_stats, sql_output_stats],
        )

    with gr.Tab("XML"):
        with gr.Row():
            with gr.Column(scale=1):
                xml_input = gr.Textbox(label="XML", lines=16, placeholder="<root><item id=\"1\">value</item></root>")
                xml_input_stats = gr.Markdown(text_stats(""))
            with gr.Column(scale=1):
                xml_output = gr.Textbox(label="Formatted XML", lines=16, interactive=False, show_copy_button=True)
                xml_output_stats = gr.Markdown(text_stats(""))

        with gr.Row():
            xml_indent = gr.Dropdown(
                label="Indent",
                choices=XML_INDENT_CHOICES,
                value=str(DEFAULT_CONFIG.default_xml_indent),
                allow_custom_value=True,
            )
            xml_reset_btn = gr.Button("Reset")
        xml_status = gr.Textbox(label="Status", interactive=False)

        xml_inputs = [xml_input, xml_indent, history_state]
        xml_outputs = [xml_output, xml_status, xml_output_stats, history_state]

        xml_input.input(fn=text_stats, inputs=[xml_input], outputs=[xml_input_stats])
        xml_input.input(fn=process_xml_debounced, inputs=xml_inputs, outputs=xml_outputs, **LIVE_PREVIEW)
        xml_indent.change(fn=process_xml, inputs=xml_inputs, outputs=xml_outputs)

        xml_reset_btn.click(
            fn=reset_xml,
            outputs=[xml_input, xml_output, xml_indent, xml_status, xml_input_stats, xml_output_stats],
        )

    with gr.Tab("JSON"):
        with gr.Row():
            with gr.Column(scale=1):
                json_input = gr.Textbox(label="JSON", lines=16, placeholder="{\"key\": [1, 2, 3]}")
                json_input_stats = gr.Markdown(text_stats(""))
            with gr.Column(scale=1):
                json_output = gr.Textbox(label="Result", lines=16, interactive=False, show_copy_button=True)
                json_output_stats = gr.Markdown(text_stats(""))

        with gr.Row():
            json_mode = gr.Radio(label="Output", choices=JSON_MODE_CHOICES, value="formatted")
            json_reset_btn = gr.Button("Reset")
        json_status = gr.Textbox(label="Status", interactive=False)

        json_inputs = [json_input, json_mode, history_state]
        json_outputs = [json_output, json_status, json_output_stats, history_state]

        json_input.input(fn=text_stats, inputs=[json_input], outputs=[json_input_stats])
        json_input.input(fn=process_json_debounced, inputs=json_inputs, outputs=json_outputs, **LIVE_PREVIEW)
        json_mode.change(fn=process_json, inputs=json_inputs, outputs=json_outputs)

        json_reset_btn.click(
            fn=reset_json,
            outputs=[json_input, json_output, json_mode, json_status, json_input_stats, json_output_stats],
        )

    with gr.Tab("History"):
        gr.Markdown(f"The last {DEFAULT_CONFIG.history_limit} results of this session, newest first.")
        history_status = gr.Textbox(label="Entries", value="0 entries", interactive=False)
        history_table = gr.Dataframe(
            headers=["Type", "Time (UTC)", "Input", "Output"],
            datatype=["str", "str", "str", "str"],
            col_count=(4, "fixed"),
            interactive=False,
            label="History",
        )
        clear_history_btn = gr.Button("Clear History", variant="stop")

        history_state.change(fn=render_history, inputs=[history_state], outputs=[history_table, history_status])
        clear_history_btn.click(fn=clear_history_handler, outputs=[history_state, history_table, history_status])

if __name__ == "__main__":
    setup_logging(getattr(logging, DEFAULT_CONFIG.log_level, logging.INFO))
    demo.launch()
