"""
Stacked win/tie/loss bars with EV markers for one equity run.

    omaha-cmpn --json Ah Ad 2c 3d  Kh Ks Qh Qs -- 7h 8h 2s > run.json
    python graphs/plot_equity.py run.json --out equity.png
"""
import argparse
import json

import matplotlib.pyplot as plt
import numpy as np


def load_report(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def plot_equity(report, out_path):
    players = report["players"]
    labels = [p["cards"] for p in players]
    win = np.array([p["win_pct"] for p in players])
    tie = np.array([p["tie_pct"] for p in players])
    loss = np.array([p["loss_pct"] for p in players])
    ev = np.array([p["ev_pct"] for p in players])
    x = np.arange(len(players))

    plt.figure(figsize=(max(6, 1.6 * len(players)), 6))
    plt.bar(x, win, color='#2ca02c', edgecolor='black', label='Win')
    plt.bar(x, tie, bottom=win, color='#ff7f0e', edgecolor='black', label='Tie')
    plt.bar(x, loss, bottom=win + tie, color='#d62728', edgecolor='black', alpha=0.7, label='Loss')
    plt.scatter(x, ev, color='black', marker='D', zorder=3, label='EV %')

    board = report.get("board") or "-"
    plt.title(f"Equity over {report['boards']} boards ({report['mode']}), board: {board}",
              fontsize=13, fontweight='bold')
    plt.xticks(x, labels, rotation=15)
    plt.ylabel('Percent of boards', fontsize=12)
    plt.legend()
    plt.grid(True, axis='y', alpha=0.3)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    print(f"Saved '{out_path}'")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("report", help="JSON written by omaha-cmpn --json")
    ap.add_argument("--out", type=str, default="graph_equity.png")
    args = ap.parse_args()
    plot_equity(load_report(args.report), args.out)


if __name__ == "__main__":
    main()
