import random
from dataclasses import dataclass

from rps_core.moves import MOVES, Move


@dataclass
class RNG:
    # None 表示不固定种子（真实对局）；测试/回放传固定种子
    seed: int | None = None

    def create(self) -> random.Random:
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def moves(self, n: int) -> list[Move]:
        rnd = self.create()
        return [computer_move(rnd) for _ in range(max(0, n))]


def computer_move(rnd: random.Random) -> Move:
    """电脑出手：三种手势等概率。"""
    return rnd.choice(MOVES)
