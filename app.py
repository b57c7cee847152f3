import gradio as gr

from example_data_extractor.handlers import (
    export_example_handler,
    generate_example_handler,
    load_schema_file,
    load_schema_text,
)
from example_data_extractor.logging_config import configure_logging
from example_data_extractor.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)

# --- UI Definition ---
with gr.Blocks(title="Example Data Extractor") as demo:
    gr.Markdown("# Example Data Extractor")
    gr.Markdown("Load a JSON schema and build an example document from its examples and defaults.")

    # State
    schema_state = gr.State()
    example_state = gr.State()

    with gr.Row():
        # Left Panel: Schema input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload Schema File", file_types=[".json"])
            schema_text = gr.Code(label="Or paste schema JSON", language="json")
            load_text_btn = gr.Button("Load Pasted Schema")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Select Target")
            pointer_selector = gr.Dropdown(
                label="Schema Node (JSON Pointer)",
                choices=["/"],
                value="/",
                allow_custom_value=True,
                interactive=True,
            )

        # Right Panel: Generation & export
        with gr.Column(scale=1):
            gr.Markdown("### 3. Options")
            preserve_case = gr.Checkbox(label="Keep 'ID' property names", value=settings.preserve_case)
            seed_input = gr.Number(label="Seed (optional)", value=settings.seed, precision=0)
            depth_input = gr.Number(label="Depth limit (optional)", value=settings.max_depth, precision=0)

            gr.Markdown("### 4. Generate & Export")
            generate_btn = gr.Button("Generate Example", variant="primary")
            example_output = gr.JSON(label="Example")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="example")
            export_btn = gr.Button("Export Example")
            download_output = gr.File(label="Download Result")

    file_input.upload(
        fn=load_schema_file,
        inputs=[file_input],
        outputs=[schema_state, pointer_selector, status_msg],
    )

    load_text_btn.click(
        fn=load_schema_text,
        inputs=[schema_text],
        outputs=[schema_state, pointer_selector, status_msg],
    )

    generate_btn.click(
        fn=generate_example_handler,
        inputs=[schema_state, pointer_selector, preserve_case, seed_input, depth_input],
        outputs=[example_state, status_msg],
    )

    example_state.change(
        fn=lambda example: example,
        inputs=[example_state],
        outputs=[example_output],
    )

    export_btn.click(
        fn=export_example_handler,
        inputs=[example_state, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
