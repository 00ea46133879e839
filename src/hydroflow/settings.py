############                Physical Constants                  ############

G = 9.81

############                Normal Depth Solver                 ############

BRACKET_LOW = 0.001
BRACKET_HIGH = 100.0
TOLERANCE = 1e-4
MAX_ITERATIONS = 100

############                Flow Regime                         ############

SUBCRITICAL_BELOW = 0.9
SUPERCRITICAL_ABOVE = 1.1

############                Input Ranges                        ############

# Documented working ranges. Values outside them are accepted unless
# range checking is requested, but the solver bracket may not hold.
ADVISORY_RANGES = {
    'Q': (0.1, 100.0),
    'b': (0.1, 50.0),
    'S0': (1e-4, 1e-1),
    'n': (0.01, 0.1),
}

############                History & Export                    ############

HISTORY_SIZE = 20
EXPORT_TITLE = 'HydroFlow Analysis Results'
EXPORT_VERSION = '2.0'
