import logging
from typing import Any, Callable, Dict, Optional

from langgraph.graph import StateGraph, START, END

from signup.state import MODE_FIELDS, PAYLOAD_MODELS, Mode, SubmissionState

logger = logging.getLogger(__name__)


class SubmissionGraphFactory:
    """
    Builds the submission graph:

        START -> (route on mode) -> personal | organization -> dispatch -> END

    The assemble nodes pick the mode's field subset and add the email;
    dispatch hands the payload to the mode's external callback.
    """

    def __init__(
        self,
        on_personal_submit: Callable[[dict], Any],
        on_org_submit: Callable[[dict], Any],
    ):
        self.handlers: Dict[Mode, Callable[[dict], Any]] = {
            Mode.PERSONAL: on_personal_submit,
            Mode.ORGANIZATION: on_org_submit,
        }

    @staticmethod
    def route_by_mode(state: SubmissionState) -> str:
        return Mode(state.mode).value

    @staticmethod
    def assemble(mode: Mode) -> Callable[[SubmissionState], dict]:
        def node(state: SubmissionState) -> dict:
            data = {name: state.values.get(name) or "" for name in MODE_FIELDS[mode]}
            payload = PAYLOAD_MODELS[mode].model_validate({**data, "email": state.email})
            return {"payload": payload.model_dump(by_alias=True)}

        return node

    def dispatch(self, state: SubmissionState) -> dict:
        mode = Mode(state.mode)
        logger.debug("Dispatching %s submission", mode.value)
        self.handlers[mode](dict(state.payload or {}))
        return {"dispatched": True}

    def build(self) -> StateGraph:
        g = StateGraph(SubmissionState)

        g.add_node(Mode.PERSONAL.value, self.assemble(Mode.PERSONAL))
        g.add_node(Mode.ORGANIZATION.value, self.assemble(Mode.ORGANIZATION))
        g.add_node("dispatch", self.dispatch)

        g.add_conditional_edges(
            START,
            self.route_by_mode,
            {Mode.PERSONAL.value: Mode.PERSONAL.value, Mode.ORGANIZATION.value: Mode.ORGANIZATION.value},
        )
        g.add_edge(Mode.PERSONAL.value, "dispatch")
        g.add_edge(Mode.ORGANIZATION.value, "dispatch")
        g.add_edge("dispatch", END)

        return g

    def compile(self, checkpointer: Optional[Any] = None):
        return self.build().compile(checkpointer=checkpointer)
