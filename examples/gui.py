# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

from cg2d.hull import ConvexHull2D
from cg2d.points import EmptyInputError, ParseError, read_points

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


class HullApp(tk.Tk):
    """Вікно: точки (випадкові або з тексту) + їхня опукла оболонка."""

    def __init__(self):
        super().__init__()
        self.title("Gift wrapping")
        self.geometry("600x650")

        top = ttk.Frame(self, padding=5)
        top.pack(fill="x")
        ttk.Label(top, text="Точок:").pack(side="left")
        self.n_entry = ttk.Entry(top, width=6)
        self.n_entry.insert(0, "30")
        self.n_entry.pack(side="left", padx=5)
        ttk.Button(top, text="Випадкові", command=self.on_random).pack(side="left")
        ttk.Button(top, text="З тексту", command=self.on_text).pack(side="left", padx=5)

        self.points_text = tk.Text(self, height=5, wrap="none")
        self.points_text.pack(fill="x", padx=5)
        self.points_text.insert("1.0", "(0, 0)\n(4, 4)\n(1, 3)\n(3, 6)\n(-3, 6)\n(-4, 4)\n")

        self.status = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status).pack(fill="x", padx=5, pady=2)

        self.fig = Figure(figsize=(4, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def on_random(self):
        try:
            n = int(self.n_entry.get())
        except ValueError:
            n = 0
        if n < 1:
            messagebox.showerror("Помилка", "Кількість точок має бути додатним цілим числом.")
            return
        self.show([(random.random(), random.random()) for _ in range(n)])

    def on_text(self):
        try:
            points = read_points(self.points_text.get("1.0", "end").splitlines())
        except (ParseError, EmptyInputError) as e:
            messagebox.showerror("Помилка парсингу точок", str(e))
            return
        self.show(points)

    def show(self, points):
        hull = ConvexHull2D(points)
        report = hull.validate()
        ok = not (report["bad_start"] or report["duplicates"]
                  or report["bad_turns"] or report["outside_points"])
        self.status.set(f"вершин: {report['vertices']}, площа: {hull.area():.6g}, "
                        f"валідація: {'OK' if ok else report}")

        ring = hull.points()
        ring = ring + ring[:1]
        self.ax.clear()
        self.ax.scatter([p.x for p in hull.P], [p.y for p in hull.P], s=10)
        self.ax.plot([p.x for p in ring], [p.y for p in ring], linewidth=1.0)
        self.ax.plot([ring[0].x], [ring[0].y], marker="o", color="red")
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_title("Convex hull (gift wrapping)")
        self.canvas.draw()


if __name__ == "__main__":
    app = HullApp()
    app.mainloop()
