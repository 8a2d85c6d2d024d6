from unittest.mock import call, patch

import pytest

from geometry_calculator.calculator_repl import (
    OPERATION_MENU,
    SHAPE_MENU,
    calculator_repl,
    main,
)
from geometry_calculator.operations import circle_perimeter


def _printed(mock_print):
    return [str(c) for c in mock_print.call_args_list]


@patch('builtins.input', side_effect=['0'])
@patch('builtins.print')
def test_repl_exit_prints_empty_history(mock_print, mock_input, config):
    assert calculator_repl(config) == []
    mock_input.assert_called_once()
    mock_print.assert_any_call("Resultados almacenados:")
    for line in SHAPE_MENU:
        mock_print.assert_any_call(line)
    assert not any(OPERATION_MENU[0] in c for c in _printed(mock_print))

@patch('builtins.input', side_effect=['1', '1', '1', '0'])
@patch('builtins.print')
def test_repl_circle_area(mock_print, mock_input, config):
    assert calculator_repl(config) == [3.1416]
    mock_print.assert_any_call("Radio: ", end="")
    mock_print.assert_any_call("Resultado: 3.1416")
    # stored results are listed after the header
    calls = mock_print.call_args_list
    header = calls.index(call("Resultados almacenados:"))
    assert calls[header + 1][0] == (3.1416,)

@patch('builtins.input', side_effect=['3', '2', '3', '4', '5', '0'])
@patch('builtins.print')
def test_repl_triangle_perimeter(mock_print, mock_input, config):
    assert calculator_repl(config) == [12.0]
    printed = _printed(mock_print)
    labels = [c for c in printed if "Lado" in c]
    assert labels == ["call('Lado 1:')", "call('Lado 2:')", "call('Lado 3:')"]
    mock_print.assert_any_call("Resultado: 12.0")

@patch('builtins.input', side_effect=['4', '3', '2', '10', '0'])
@patch('builtins.print')
def test_repl_power(mock_print, mock_input, config):
    assert calculator_repl(config) == [1024.0]
    mock_print.assert_any_call("Base:")
    mock_print.assert_any_call("Exponente (entero, puede ser 0 o positivo):")
    mock_print.assert_any_call("Resultado: 1024.0")

@patch('builtins.input', side_effect=['2', '0', '0'])
@patch('builtins.print')
def test_repl_back_records_nothing(mock_print, mock_input, config):
    assert calculator_repl(config) == []
    assert not any("Resultado:" in c for c in _printed(mock_print))
    assert mock_input.call_count == 3

@patch('builtins.input', side_effect=[
    'x', '9', '2',          # shape: bad, out of range, square
    'abc', '4', '1',        # operation: bad, out of range, area
    '-3', '0', 'nope', '4', # side: negative, zero, bad, 4
    '0',
])
@patch('builtins.print')
def test_repl_retries_until_valid(mock_print, mock_input, config):
    assert calculator_repl(config) == [16.0]
    printed = _printed(mock_print)
    assert any("Por favor ingresa un número válido." in c for c in printed)
    assert any("Opción fuera de rango." in c for c in printed)
    assert any("El valor debe ser mayor que 0." in c for c in printed)
    assert any("Entrada inválida. Ingresa un número válido." in c for c in printed)
    mock_print.assert_any_call("Resultado: 16.0")

@patch('builtins.input', side_effect=[
    '1', '2', '1',
    '2', '1', '2',
    '5', '2', '2',
    '0',
])
@patch('builtins.print')
def test_repl_history_keeps_order(mock_print, mock_input, config):
    assert calculator_repl(config) == [circle_perimeter(1.0), 4.0, 10.0]
    calls = mock_print.call_args_list
    header = calls.index(call("Resultados almacenados:"))
    assert [c[0][0] for c in calls[header + 1:]] == [circle_perimeter(1.0), 4.0, 10.0]

@patch('builtins.input', side_effect=['1', '0'])
@patch('builtins.print')
@patch('geometry_calculator.calculator_repl.ask_shape_menu', side_effect=[9, 0])
def test_repl_unknown_shape_reported(mock_shape_menu, mock_print, mock_input, config):
    assert calculator_repl(config) == []
    mock_print.assert_any_call("Figura desconocida.")

@patch('builtins.input', side_effect=['1', '1', '0'])
@patch('builtins.print')
@patch('geometry_calculator.calculator.GeometryCalculator.perform_calculation',
       side_effect=ValueError("could not convert"))
def test_repl_unexpected_value_error(mock_perform, mock_print, mock_input, config):
    assert calculator_repl(config) == []
    mock_print.assert_any_call("Entrada inválida. Intenta de nuevo.")

@patch('builtins.input', side_effect=[KeyboardInterrupt(), '0'])
@patch('builtins.print')
def test_repl_keyboard_interrupt(mock_print, mock_input, config):
    calculator_repl(config)
    mock_print.assert_any_call("\nOperación cancelada")
    mock_print.assert_any_call("Resultados almacenados:")

@patch('builtins.input', side_effect=['1', '1', '2', EOFError()])
@patch('builtins.print')
def test_repl_eof_ends_session(mock_print, mock_input, config):
    assert calculator_repl(config) == [3.1416 * 2.0 * 2.0]
    mock_print.assert_any_call("\nFin de la entrada.")
    mock_print.assert_any_call("Resultados almacenados:")

@patch('builtins.input', side_effect=['0'])
@patch('geometry_calculator.calculator.GeometryCalculator.__init__',
       side_effect=Exception("Fatal init error"))
def test_repl_fatal_error_on_init(mock_init, mock_input, config, capsys):
    with pytest.raises(Exception, match="Fatal init error"):
        calculator_repl(config)
    captured = capsys.readouterr()
    assert "Fatal error: Fatal init error" in captured.out

@patch('geometry_calculator.calculator_repl.calculator_repl')
def test_main_runs_repl(mock_repl):
    assert main() is None
    mock_repl.assert_called_once_with()
