"""Platform logo lookup."""

from __future__ import annotations

from urllib.parse import quote

PLATFORM_LOGOS: dict[str, str] = {
    "codeforces.com": "https://sta.codeforces.com/s/94338/images/codeforces-logo-with-text.png",
    "leetcode.com": "https://leetcode.com/static/images/LeetCode_logo_rvs.png",
    "atcoder.jp": "https://img.atcoder.jp/assets/atcoder.png",
    "topcoder.com": "https://images.ctfassets.net/b5f1djy59z3a/4Fk4Ie7L62lhw52mKnA007/a9582587597c366432a233b62f5f9999/Topcoder_Logo_2021.svg",
    "codingninjas.com/codestudio": "https://files.codingninjas.in/cn-logo-dark-9826.svg",
    "hackerearth.com": "https://static-fastly.hackerearth.com/static/he-logo-new.svg",
    "geeksforgeeks.org": "https://media.geeksforgeeks.org/wp-content/cdn-uploads/20210420155809/gfg-new-logo.png",
    "codechef.com": "https://cdn.codechef.com/images/cc-logo.svg",
}

PLACEHOLDER_URL = "https://placehold.co/100x40/f0f0f0/333?text={label}"


def placeholder_logo_url(host: str) -> str:
    """Generated placeholder image labeled with the host's first segment."""
    return PLACEHOLDER_URL.format(label=quote(host.split(".")[0]))


def logo_url(host: str) -> str:
    return PLATFORM_LOGOS.get(host) or placeholder_logo_url(host)
