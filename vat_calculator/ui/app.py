import gradio as gr

from vat_calculator.agents.calculator_agent import CalculatorAgent
from vat_calculator.config import DEFAULT_COUNTRY, DEFAULT_PERCENT_FEE
from vat_calculator.domain.countries import get_country, list_countries
from vat_calculator.observability.logging_config import setup_logging
from vat_calculator.presentation.breakdown import build_breakdown, render_markdown


setup_logging()


def _render(agent: CalculatorAgent) -> str:
    return render_markdown(build_breakdown(agent.result))


def _labels(code: str):
    symbol = get_country(code).symbol
    return f"Transaction Amount ({symbol})", f"Flat Fee ({symbol})"


def on_country_change(code, percent_fee):
    """Reseed the amount and flat fee for the new country and recompute."""
    agent = CalculatorAgent(code)
    agent.set_percent_fee(percent_fee)
    amount_label, flat_label = _labels(code)
    return (
        gr.update(value=agent.amount, label=amount_label),
        gr.update(value=agent.flat_fee, label=flat_label),
        _render(agent),
    )


def on_calculate(code, amount, flat_fee, percent_fee):
    agent = CalculatorAgent(code)
    agent.set_amount(amount)
    agent.set_flat_fee(flat_fee)
    agent.set_percent_fee(percent_fee)
    return _render(agent)


initial = CalculatorAgent(DEFAULT_COUNTRY)

with gr.Blocks(title="VAT Calculator") as demo:
    gr.Markdown("# VAT Calculator")

    country_input = gr.Dropdown(
        choices=[(f"{c.flag} {c.name}", c.code) for c in list_countries()],
        value=initial.country.code,
        label="Country of Service",
    )
    amount_input = gr.Number(
        value=initial.amount, step=0.01, label=f"Transaction Amount ({initial.country.symbol})"
    )
    flat_fee_input = gr.Number(
        value=initial.flat_fee, step=0.01, label=f"Flat Fee ({initial.country.symbol})"
    )
    percent_fee_input = gr.Number(
        value=DEFAULT_PERCENT_FEE, step=0.01, minimum=0, maximum=100, label="Percentage Fee (%)"
    )

    run_button = gr.Button("Calculate", variant="primary")

    output_md = gr.Markdown(_render(initial))

    country_input.change(
        fn=on_country_change,
        inputs=[country_input, percent_fee_input],
        outputs=[amount_input, flat_fee_input, output_md],
    )
    # any edit to a number field recomputes the breakdown
    for field in (amount_input, flat_fee_input, percent_fee_input):
        field.change(
            fn=on_calculate,
            inputs=[country_input, amount_input, flat_fee_input, percent_fee_input],
            outputs=output_md,
        )
    run_button.click(
        fn=on_calculate,
        inputs=[country_input, amount_input, flat_fee_input, percent_fee_input],
        outputs=output_md,
    )


if __name__ == "__main__":
    demo.launch()
