from realexpr.visitors.base import Visitor
from realexpr.visitors.differentiator import Differentiator, differentiate
from realexpr.visitors.evaluator import Evaluator, evaluate

__all__ = ["Visitor", "Evaluator", "evaluate", "Differentiator", "differentiate"]
