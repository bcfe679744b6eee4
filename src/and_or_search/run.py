# run.py
# Entry point. Config and wiring only, no logic lives here.
#
# Set AND_OR_TRACE=1 (or put it in .env) to watch every OR/AND expansion.

from and_or_search import display
from and_or_search.config import SearchSettings
from and_or_search.errors import ContractViolationError
from and_or_search.result import Success
from and_or_search.search import AndOrGraphSearch
from and_or_search.vacuum import A, B, VacuumWorldProblem
from and_or_search.validation import check_plan

# Both squares dirty, agent starting on either side.
START_LOCATIONS = [A, B]


def main() -> None:
    settings = SearchSettings.from_env()
    engine = AndOrGraphSearch(settings)

    display.banner(
        "And-Or Graph Search",
        f"Erratic vacuum world · trace={settings.trace} · path index={settings.path_index}",
    )

    for location in START_LOCATIONS:
        problem = VacuumWorldProblem(location)
        try:
            result = engine.search(problem)
        except ContractViolationError as exc:
            display.contract_violation(exc)
            raise

        display.show_result(result)
        if isinstance(result, Success):
            display.plan_check(check_plan(result.plan, problem).errors)


if __name__ == "__main__":
    main()
