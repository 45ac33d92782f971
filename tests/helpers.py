"""Builders for GraphQL response payloads used across tests."""


def repo_node(name_with_owner, stars=0, issues=0, pull_requests=0, forks=None,
              pushed_at="2020-01-01T00:00:00Z"):
    node = {
        "nameWithOwner": name_with_owner,
        "url": f"https://github.com/{name_with_owner}",
        "pushedAt": pushed_at,
        "stargazers": {"totalCount": stars},
        "issues": {"totalCount": issues},
        "pullRequests": {"totalCount": pull_requests},
    }
    if forks is not None:
        node["forks"] = {"totalCount": forks}
    return node


def network_payload(target, fork_nodes=(), fork_total=None, parent=None):
    repository = dict(target)
    repository["parent"] = parent
    repository["forks"] = {
        "totalCount": len(fork_nodes) if fork_total is None else fork_total,
        "nodes": list(fork_nodes),
    }
    return {"data": {"repository": repository}}
