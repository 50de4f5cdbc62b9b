from __future__ import annotations

import gradio as gr

from .handlers import (
    clear_outputs,
    convert_handler,
    export_json_handler,
    load_csv_file,
    load_sample_data,
)
from .options import ARRAY_FORMAT, OBJECT_FORMAT


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="CSV to JSON Converter") as demo:
        gr.Markdown("# CSV to JSON Converter")
        gr.Markdown("Upload or paste delimited text, pick a layout, and convert it to JSON.")

        with gr.Row():
            # Left Panel: Input & Options
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                file_input = gr.File(label="Upload CSV File", file_types=[".csv", ".tsv", ".txt"])
                csv_input = gr.Textbox(
                    label="CSV Data",
                    lines=12,
                    placeholder="name,age,city\nJohn,30,New York",
                )
                with gr.Row():
                    sample_btn = gr.Button("Load Sample")
                    clear_btn = gr.Button("Clear")
                status_msg = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Options")
                with gr.Accordion("Conversion Options", open=True):
                    delimiter = gr.Textbox(label="Delimiter", value=",", max_lines=1, info="Use \\t for tabs.")
                    has_header = gr.Checkbox(label="First row is a header", value=True)
                    output_format = gr.Radio(
                        choices=[("Array of objects", ARRAY_FORMAT), ("Object of arrays", OBJECT_FORMAT)],
                        value=ARRAY_FORMAT,
                        label="Output Format",
                    )
                    pretty_print = gr.Checkbox(label="Pretty print", value=True)
                    infer_types = gr.Checkbox(label="Infer types (numbers, booleans, null)", value=True)

            # Right Panel: Output
            with gr.Column(scale=1):
                gr.Markdown("### 3. Convert")
                convert_btn = gr.Button("Convert", variant="primary")
                json_output = gr.Code(label="JSON Output", language="json", interactive=False)
                preview = gr.JSON(label="Preview (first 3 records)")

                gr.Markdown("### 4. Export")
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="converted")
                export_btn = gr.Button("Download JSON")
                download_output = gr.File(label="Download Result")

        option_inputs = [csv_input, delimiter, has_header, output_format, pretty_print, infer_types]

        file_input.upload(
            fn=load_csv_file,
            inputs=[file_input],
            outputs=[csv_input, status_msg],
        )

        sample_btn.click(fn=load_sample_data, outputs=[csv_input, status_msg])

        clear_btn.click(
            fn=clear_outputs,
            outputs=[csv_input, json_output, preview, status_msg, download_output],
        )

        convert_btn.click(
            fn=convert_handler,
            inputs=option_inputs,
            outputs=[json_output, preview, status_msg],
        )

        export_btn.click(
            fn=export_json_handler,
            inputs=option_inputs + [output_filename],
            outputs=[download_output, status_msg],
        )

    return demo
