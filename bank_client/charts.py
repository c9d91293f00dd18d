from __future__ import annotations

from typing import List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from bank_client.formatting import (
    ERROR_COLOR,
    LEVEL_COLORS,
    SUCCESS_COLOR,
    pie_slice_percentages,
    success_rate_level,
)
from bank_client.schemas import (
    NOT_SUBSCRIBED,
    SUBSCRIBED,
    AgeDistributionPoint,
    BalanceDurationSample,
    JobSuccessPoint,
    PredictionResult,
    TargetDistributionPoint,
)

# rouge = "Tidak Berlangganan", vert = "Berlangganan" (ordre renvoyé par le backend)
PIE_COLORS = ["#FF6B6B", "#51CF66"]
OUTCOME_COLORS = {"yes": SUCCESS_COLOR, "no": ERROR_COLOR}

_LAYOUT = dict(
    template="plotly_white",
    margin=dict(l=20, r=20, t=40, b=20),
    font=dict(family="Inter, sans-serif"),
)


def prediction_probability_chart(result: PredictionResult) -> go.Figure:
    yes = result.probability_yes * 100.0
    names = ["Probabilitas YA", "Probabilitas TIDAK"]
    values = [yes, 100.0 - yes]

    fig = go.Figure(
        go.Bar(
            x=values,
            y=names,
            orientation="h",
            marker_color=[SUCCESS_COLOR, ERROR_COLOR],
            text=[f"{v:.2f}%" for v in values],
            textposition="auto",
            hovertemplate="%{y}: %{x:.2f}%<extra></extra>",
        )
    )
    fig.update_layout(height=220, xaxis=dict(range=[0, 100], visible=False), **_LAYOUT)
    return fig


def target_distribution_pie(points: List[TargetDistributionPoint]) -> go.Figure:
    labels = [p.label for p in points]
    values = [p.value for p in points]
    percents = pie_slice_percentages(values)

    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            hole=0.5,
            sort=False,
            marker=dict(colors=[PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(points))]),
            text=[f"{p}%" for p in percents],
            textinfo="text",
            hovertemplate="%{label}: %{value:,}<extra></extra>",
        )
    )
    fig.update_layout(legend=dict(orientation="h", y=-0.1), **_LAYOUT)
    return fig


def job_success_bar(points: List[JobSuccessPoint]) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=[p.success_rate for p in points],
            y=[p.job for p in points],
            orientation="h",
            name="Tingkat Keberhasilan",
            marker_color=[LEVEL_COLORS[success_rate_level(p.success_rate)] for p in points],
            hovertemplate="%{y}: %{x:.1f}%<extra></extra>",
        )
    )
    fig.update_layout(
        xaxis_title="Tingkat Keberhasilan (%)",
        yaxis_title="Pekerjaan",
        height=max(300, 35 * len(points)),
        **_LAYOUT,
    )
    return fig


def age_distribution_bar(points: List[AgeDistributionPoint]) -> go.Figure:
    df = pd.DataFrame(
        {
            "age_group": [p.age_group for p in points],
            SUBSCRIBED: [p.subscribed for p in points],
            NOT_SUBSCRIBED: [p.not_subscribed for p in points],
        }
    )
    fig = px.bar(
        df,
        x="age_group",
        y=[SUBSCRIBED, NOT_SUBSCRIBED],
        barmode="group",
        color_discrete_map={SUBSCRIBED: SUCCESS_COLOR, NOT_SUBSCRIBED: ERROR_COLOR},
        labels={"age_group": "Kelompok Usia", "value": "Jumlah Nasabah", "variable": "Status"},
    )
    fig.update_layout(**_LAYOUT)
    return fig


def balance_duration_scatter(samples: List[BalanceDurationSample]) -> go.Figure:
    df = pd.DataFrame(
        {
            "balance": [s.balance for s in samples],
            "duration": [s.duration for s in samples],
            "y": [s.y for s in samples],
            "y_label": [s.y_label or s.y for s in samples],
        }
    )
    fig = px.scatter(
        df,
        x="balance",
        y="duration",
        color="y",
        color_discrete_map=OUTCOME_COLORS,
        hover_data={"y_label": True, "y": False},
        labels={
            "balance": "Saldo Rekening (€)",
            "duration": "Durasi Panggilan (detik)",
            "y": "Status Langganan",
            "y_label": "Status Langganan",
        },
    )
    fig.update_layout(**_LAYOUT)
    return fig
