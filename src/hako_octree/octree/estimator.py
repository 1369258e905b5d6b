# octree/estimator.py

# depth ~= log8(N / threshold)
# N is total points
# 分布が一様な場合の目安でしかない
def estimate_cost(num_points: int, max_depth: int, threshold: int):
    """
    一様分布を仮定した octree の深さ・リーフ数・探索コストを見積もる。
    """
    if num_points <= 0 or max_depth <= 0 or threshold <= 0:
        return {"estimated_depth": 0, "estimated_leaves": 0, "estimated_query_visits": 0}

    # threshold * 8^depth >= N となる最小の depth（max_depth で頭打ち）
    depth = 0
    while depth < max_depth and threshold * 8 ** depth < num_points:
        depth += 1
    leaves = 8 ** depth
    # 1 回の範囲探索で根から各レベルの隣接ノードを辿るおおよその回数
    visits = 1 + 8 * depth

    return {
        "num_points": num_points,
        "max_depth": max_depth,
        "threshold": threshold,
        "estimated_depth": depth,
        "estimated_leaves": leaves,
        "estimated_avg_leaf_size": round(num_points / leaves, 3),
        "estimated_query_visits": visits,
    }
