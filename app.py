import logging

import gradio as gr

from linesort.config import load_config
from linesort.handlers import (
    alphabetize_handler,
    clear_selection,
    export_text_handler,
    load_text_file_handler,
    remember_selection,
)

config = load_config()
logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- UI Definition ---
with gr.Blocks(title=config.title) as demo:
    gr.Markdown("# Line Sort")
    gr.Markdown(
        "Select several lines to sort them, or select a single line (or just place the cursor on it) "
        "to sort the comma, semicolon, pipe or multi-space separated values it contains."
    )

    # State
    selection_state = gr.State()

    with gr.Row():
        # Left Panel: Editor
        with gr.Column(scale=3):
            editor = gr.Textbox(label="Text", lines=20, max_lines=40, interactive=True)
            alphabetize_btn = gr.Button("Alphabetize", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Import / Export
        with gr.Column(scale=1):
            gr.Markdown("### Import")
            file_input = gr.File(label="Upload Text File", file_types=[".txt", ".csv", ".md"])

            gr.Markdown("### Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="sorted")
            export_btn = gr.Button("Export Text")
            download_output = gr.File(label="Download Result")

    editor.select(
        fn=remember_selection,
        inputs=None,
        outputs=[selection_state],
    )

    editor.input(
        fn=clear_selection,
        inputs=[editor],
        outputs=[selection_state],
    )

    alphabetize_btn.click(
        fn=alphabetize_handler,
        inputs=[editor, selection_state],
        outputs=[editor, status_msg, selection_state],
    )

    file_input.upload(
        fn=load_text_file_handler,
        inputs=[file_input],
        outputs=[editor, status_msg, selection_state],
    )

    export_btn.click(
        fn=export_text_handler,
        inputs=[editor, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_name=config.server_name, server_port=config.server_port, share=config.share)
