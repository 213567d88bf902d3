"""Pydantic models for ADM1 state snapshots."""

from pydantic import BaseModel, ConfigDict, Field


class StateSnapshot(BaseModel):
    """Named view of one persisted ADM1 state vector, in canonical order."""

    model_config = ConfigDict(extra="forbid")

    # Soluble components
    S_su: float = Field(0.0, description="Monosaccharides (kg COD/m³)")
    S_aa: float = Field(0.0, description="Amino acids (kg COD/m³)")
    S_fa: float = Field(0.0, description="Long chain fatty acids (kg COD/m³)")
    S_va: float = Field(0.0, description="Total valerate (kg COD/m³)")
    S_bu: float = Field(0.0, description="Total butyrate (kg COD/m³)")
    S_pro: float = Field(0.0, description="Total propionate (kg COD/m³)")
    S_ac: float = Field(0.0, description="Total acetate (kg COD/m³)")
    S_h2: float = Field(0.0, description="Hydrogen gas (kg COD/m³)")
    S_ch4: float = Field(0.0, description="Methane gas (kg COD/m³)")
    S_IC: float = Field(0.0, description="Inorganic carbon (kmol C/m³)")
    S_IN: float = Field(0.0, description="Inorganic nitrogen (kmol N/m³)")
    S_I: float = Field(0.0, description="Soluble inerts (kg COD/m³)")

    # Particulate components
    X_xc: float = Field(0.0, description="Composites (kg COD/m³)")
    X_ch: float = Field(0.0, description="Carbohydrates (kg COD/m³)")
    X_pr: float = Field(0.0, description="Proteins (kg COD/m³)")
    X_li: float = Field(0.0, description="Lipids (kg COD/m³)")
    X_su: float = Field(0.0, description="Sugar degraders (kg COD/m³)")
    X_aa: float = Field(0.0, description="Amino acid degraders (kg COD/m³)")
    X_fa: float = Field(0.0, description="LCFA degraders (kg COD/m³)")
    X_c4: float = Field(0.0, description="Valerate and butyrate degraders (kg COD/m³)")
    X_pro: float = Field(0.0, description="Propionate degraders (kg COD/m³)")
    X_ac: float = Field(0.0, description="Acetate degraders (kg COD/m³)")
    X_h2: float = Field(0.0, description="Hydrogen degraders (kg COD/m³)")
    X_I: float = Field(0.0, description="Particulate inerts (kg COD/m³)")

    S_cat: float = Field(0.0, description="Cations (kmol/m³)")
    S_an: float = Field(0.0, description="Anions (kmol/m³)")

    # Ionic speciation
    S_hva: float = Field(0.0, description="Valerate ion (kg COD/m³)")
    S_hbu: float = Field(0.0, description="Butyrate ion (kg COD/m³)")
    S_hpro: float = Field(0.0, description="Propionate ion (kg COD/m³)")
    S_hac: float = Field(0.0, description="Acetate ion (kg COD/m³)")
    S_hco3: float = Field(0.0, description="Bicarbonate (kmol C/m³)")
    S_nh3: float = Field(0.0, description="Free ammonia (kmol N/m³)")

    # Gas phase
    S_gas_h2: float = Field(0.0, description="Hydrogen in headspace (kg COD/m³)")
    S_gas_ch4: float = Field(0.0, description="Methane in headspace (kg COD/m³)")
    S_gas_co2: float = Field(0.0, description="Carbon dioxide in headspace (kmol C/m³)")

    Q_D: float = Field(0.0, description="Digester flow rate (m³/d)")
    T_D: float = Field(0.0, description="Digester temperature (°C)")

    gas_ch4: float = Field(0.0, description="Biogas flow output")
    gas_vol: float = Field(0.0, description="Gas volume output")

    # Diagnostics
    ph: float = Field(0.0, description="pH value")
    S_co2: float = Field(0.0, description="Dissolved carbon dioxide (kmol C/m³)")
    S_nh4: float = Field(0.0, description="Ammonium (kmol N/m³)")
