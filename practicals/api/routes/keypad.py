"""Basic calculator keypad. The client holds the state and posts it back with each key."""

from fastapi import APIRouter, HTTPException

from practicals.api.schemas import KeypadPressRequest, KeypadStateModel
from practicals.components.keypad import InvalidStateError, KeypadState, UnknownKeyError, press

router = APIRouter()


@router.post("/press", response_model=KeypadStateModel)
def press_key(data: KeypadPressRequest) -> KeypadStateModel:
    state = KeypadState(
        display=data.state.display,
        previous_value=data.state.previous_value,
        operation=data.state.operation,
        waiting_for_operand=data.state.waiting_for_operand,
    )
    try:
        new_state = press(state, data.key)
    except (UnknownKeyError, InvalidStateError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return KeypadStateModel(
        display=new_state.display,
        previous_value=new_state.previous_value,
        operation=new_state.operation,
        waiting_for_operand=new_state.waiting_for_operand,
    )
