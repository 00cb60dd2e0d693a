"""Plotly figures for the calculator and portfolio views."""

import plotly.graph_objects as go
import pandas as pd


def create_expense_breakdown_chart(metrics):
    """Donut of where monthly gross revenue goes; zero/negative slices are dropped."""
    slices = [
        ('Net Profit', metrics.monthly_net, '#10b981'),
        ('OTA Commission', metrics.monthly_ota, '#f43f5e'),
        ('Maintenance', metrics.monthly_maintenance, '#f59e0b'),
        ('Extra Expenses', metrics.monthly_extra, '#6366f1'),
    ]
    slices = [s for s in slices if s[1] > 0]
    fig = go.Figure(go.Pie(
        labels=[s[0] for s in slices],
        values=[s[1] for s in slices],
        marker=dict(colors=[s[2] for s in slices]),
        hole=0.6,
        sort=False,
    ))
    fig.update_layout(title='Monthly Expense Breakdown', height=360)
    return fig


def create_revenue_vs_net_chart(metrics):
    """Monthly figures against the yearly figures averaged per month."""
    periods = ['Monthly', 'Yearly (Avg)']
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=periods,
        y=[metrics.monthly_revenue, metrics.yearly_revenue / 12],
        name='Revenue',
        marker_color='#6366f1'
    ))
    fig.add_trace(go.Bar(
        x=periods,
        y=[metrics.monthly_net, metrics.yearly_net / 12],
        name='Net Income',
        marker_color='#10b981'
    ))
    fig.update_layout(barmode='group', title='Revenue vs Net Income', height=360)
    return fig


def create_sensitivity_chart(sweep_df: pd.DataFrame, current_occupancy=None):
    """Gross revenue, NOI and deal CM across the occupancy sweep."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=sweep_df['occupancy'],
        y=sweep_df['gross_revenue'],
        mode='lines+markers',
        name='Gross Revenue',
        line=dict(color='#6366f1', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=sweep_df['occupancy'],
        y=sweep_df['net_income'],
        mode='lines+markers',
        name='Net Income',
        fill='tozeroy',
        line=dict(color='#10b981', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=sweep_df['occupancy'],
        y=sweep_df['deal_absolute_cm'],
        mode='lines',
        name='Deal CM',
        line=dict(color='#f59e0b', width=2, dash='dash')
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    if current_occupancy is not None:
        fig.add_vline(x=current_occupancy, line_dash="dot", line_color="#94a3b8",
                      annotation_text="Current")
    fig.update_layout(
        title='Occupancy Sensitivity (Monthly)',
        xaxis_title='Occupancy (%)',
        yaxis_title='Amount',
        height=400
    )
    return fig


def create_amortization_chart(schedule):
    """Interest vs principal per EMI with the outstanding balance on a second axis."""
    df = pd.DataFrame(schedule)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df['month'], y=df['principal'], name='Principal', marker_color='#10b981'))
    fig.add_trace(go.Bar(x=df['month'], y=df['interest'], name='Interest', marker_color='#f43f5e'))
    fig.add_trace(go.Scatter(
        x=df['month'], y=df['balance'], name='Balance', yaxis='y2',
        line=dict(color='#334155', width=2)
    ))
    fig.update_layout(
        barmode='stack',
        title='Loan Amortization',
        xaxis_title='Month',
        yaxis=dict(title='EMI split'),
        yaxis2=dict(title='Balance', overlaying='y', side='right'),
        height=380
    )
    return fig


def create_portfolio_chart(projects):
    """Monthly revenue vs net per saved project."""
    names = [p.inputs.hotel_name or 'Untitled' for p in projects]
    fig = go.Figure()
    fig.add_trace(go.Bar(x=names, y=[p.summary.monthly_revenue for p in projects],
                         name='Revenue', marker_color='#6366f1'))
    fig.add_trace(go.Bar(x=names, y=[p.summary.monthly_net for p in projects],
                         name='Net', marker_color='#10b981'))
    fig.update_layout(barmode='group', title='Portfolio Performance (Monthly)', height=380)
    return fig
