from langgraph.graph import END, StateGraph

from .history import finalize_run
from .session import choose_destination, choose_extensions, fill_inputs, open_wizard
from .types import WizardRunState


def _next_or_finalize(next_node: str):
    def route(state: WizardRunState) -> str:
        if state.get("error"):
            return "finalize"
        return next_node
    return route


def build_graph():
    graph = StateGraph(WizardRunState)
    graph.add_node("open_wizard", open_wizard)
    graph.add_node("fill_inputs", fill_inputs)
    graph.add_node("choose_extensions", choose_extensions)
    graph.add_node("choose_destination", choose_destination)
    graph.add_node("finalize", finalize_run)

    graph.set_entry_point("open_wizard")
    for node, following in (
        ("open_wizard", "fill_inputs"),
        ("fill_inputs", "choose_extensions"),
        ("choose_extensions", "choose_destination"),
        ("choose_destination", "finalize"),
    ):
        graph.add_conditional_edges(
            node,
            _next_or_finalize(following),
            {following: following, "finalize": "finalize"},
        )
    graph.add_edge("finalize", END)

    return graph.compile()
