from lispy.types.atom import Atom, Boolean, Nil, NilType, Number, Symbol
from lispy.types.expression import Builtin, Closure, Empty, EmptyType, Expression, Pair
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
