from vat_calculator.agents.calculator_agent import CalculatorAgent
from vat_calculator.domain.countries import UnknownCountryError, list_countries
from vat_calculator.observability.logging_config import setup_logging
from vat_calculator.presentation.breakdown import build_breakdown, render_text
from vat_calculator.presentation.formatting import format_percent


def _ask(prompt: str, current: str) -> str:
    raw = input(f"{prompt} [{current}]: ").strip()
    return raw if raw else current


def main():
    setup_logging()

    agent = CalculatorAgent()

    print("=== VAT Calculator ===")
    for c in list_countries():
        print(f"  {c.code}  {c.flag} {c.name}")

    while True:
        code = _ask("Country of service", agent.country.code)
        try:
            agent.select_country(code)
            break
        except UnknownCountryError as e:
            print(e)

    symbol = agent.country.symbol
    agent.set_amount(_ask(f"Transaction amount ({symbol})", f"{agent.amount:g}"))
    agent.set_flat_fee(_ask(f"Flat fee ({symbol})", f"{agent.flat_fee:g}"))
    agent.set_percent_fee(_ask("Percentage fee (%)", format_percent(agent.percent_fee)))

    print()
    print(render_text(build_breakdown(agent.result)))


if __name__ == "__main__":
    main()
