r"""@package mathfuncs.functions

Function objects which can be evaluated, differentiated and simplified.

Each function is an immutable tree of nodes. The leaves are constants
(basics.Constant) and the undefined function (basics.Nan). Standard functions
like powers, sines and logarithms (the unary.UnaryFunction sub classes) take
an optional inner 'chain' function, and sums, products and quotients
(mathfuncs.functions.composite) combine any other functions. Piecewise
functions are built using concatenation.Concatenation.

The derivative of any function is again such a tree:

~~~.py
f = Product(Sine(), Exponential())
print(f.derivative())       # Σ(Π(sin(x), eˣ), Π(cos(x), eˣ))
~~~

Every node implements simplify(), which brings the tree into a canonical form
by merging like terms and sorting the children of sums and products in a
fixed total order of all functions (see MathFunction.compare_to()).

Points where a function or its derivative is not continuous are called knots
here. They can be analyzed using MathFunction.get_knot_report() and
MathFunction.get_knots().
"""

from .interval import Interval
from .knots import KnotReport, Discontinuity
from .common import TypeMismatchError, UnsupportedOperationError
from .mathfunction import MathFunction, ExpressionWarning
from .mathfunction import compare_functions, sort_functions
from .basics import Constant, Nan
from .composite import Sum, Product, Quotient
from .power import Power
from .trig import Sine, ArcSine, ArcTangent
from .explog import Exponential, Logarithm
from .concatenation import Concatenation
from .evaluators import FunctionEvaluator
