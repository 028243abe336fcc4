# This project was developed with assistance from AI tools.
"""
Centralized prompt templates for all LLM interactions.

Both extraction prompts ask for a JSON object shaped like the camelCase
DisclosureRecord, restricted to the parts each source document can answer.
They are used as ChatPromptTemplate messages, so literal braces are doubled.

Style rules applied to all prompts:
- JSON only, no commentary
- Missing values are empty strings, never guesses
"""

# =============================================================================
# FORMATTING RULES (appended to relevant prompts)
# =============================================================================
JSON_ONLY_RULE = "JSONのみ返してください。説明文やコードブロックの前置きは不要です。"

VALUE_RULES = """値の記入ルール:
- 値が見つからない場合は空文字""にする（推測しない）
- 金額はカンマなしの整数（円）。「税込」「税別」などの注記は詳細欄に含める
- 令和・平成の日付は西暦（YYYY年M月D日）に変換する
- 有無を表す項目は true / false"""


# =============================================================================
# CONTRACT EXTRACTION (賃貸借契約書)
# =============================================================================
CONTRACT_SYSTEM_PROMPT = f"""あなたは日本の不動産賃貸借契約書を読み取る専門家です。
与えられた契約書のテキストから重要事項説明書の作成に必要な情報を抽出し、次の形式のJSONで返してください。

{{{{
  "borrowerName": "借主の氏名",
  "lenderName": "貸主の氏名または法人名",
  "building": {{{{
    "name": "物件名称（部屋番号を含む）",
    "addressDisplay": "所在地（住居表示）",
    "structure": "構造（RC造等）",
    "floorArea": "専有面積（㎡）",
    "layout": "間取り（1LDK等）",
    "builtDate": "建築年月"
  }}}},
  "landlord": {{{{ "name": "貸主名", "address": "貸主住所" }}}},
  "infrastructure": {{{{
    "water": {{{{ "available": true, "provider": "公営水道等" }}}},
    "electricity": {{{{ "available": true, "provider": "○○電力等" }}}},
    "gas": {{{{ "available": true, "type": "都市ガス/プロパンガス" }}}},
    "drainage": {{{{ "available": true, "type": "公共下水等" }}}}
  }}}},
  "equipment": {{{{
    "kitchen": {{{{ "exists": true, "detail": "" }}}},
    "bathroom": {{{{ "exists": true, "detail": "" }}}},
    "toilet": {{{{ "exists": true, "detail": "" }}}},
    "aircon": {{{{ "exists": true, "detail": "台数等" }}}},
    "internet": {{{{ "exists": false, "detail": "回線種別・費用" }}}}
  }}}},
  "commonFacilities": {{{{
    "parking": {{{{ "exists": false, "detail": "料金・条件" }}}},
    "bicycle": {{{{ "exists": false, "detail": "" }}}}
  }}}},
  "asbestos": {{{{ "recordExists": false, "detail": "石綿使用調査の有無と結果" }}}},
  "earthquake": {{{{ "applicable": false, "diagnosisExists": false, "detail": "耐震診断の有無と結果" }}}},
  "financials": {{{{
    "rent": 0,
    "managementFee": 0,
    "deposit": 0,
    "keyMoney": 0,
    "otherFees": [{{{{ "name": "費用名（鍵交換費用、保証料等）", "amount": 0 }}}}],
    "paymentDeadline": "支払期限",
    "paymentMethod": "支払方法",
    "bankInfo": "振込先"
  }}}},
  "cancellation": "解約条件（解約予告期間、日割り計算等）",
  "penalty": {{{{ "exists": false, "detail": "違約金・短期解約違約金" }}}},
  "contract": {{{{
    "type": "普通賃貸借/定期賃貸借",
    "startDate": "契約開始日",
    "endDate": "契約終了日",
    "periodYears": 2,
    "renewalTerms": "更新条件・手続き",
    "renewalFee": "更新料（例: 新賃料の1ヶ月分）",
    "renewalAdminFee": "更新事務手数料"
  }}}},
  "usageRestrictions": {{{{
    "purpose": "居住用",
    "petPolicy": "ペット飼育の可否・条件",
    "instrumentPolicy": "楽器演奏の可否・条件",
    "renovationPolicy": "改装・造作の可否",
    "other": "禁止事項"
  }}}},
  "depositSettlement": "敷金の精算方法・原状回復の範囲",
  "management": {{{{
    "buildingManager": {{{{ "name": "管理会社名", "address": "", "phone": "" }}}}
  }}}},
  "otherImportantMatters": "特約事項（クリーニング代、鍵交換、火災保険、連帯保証人、その他の特約を全て）"
}}}}

特約事項の抽出について重要:
- 「特約条項」「特約事項」「付帯条件」「覚書」「別記」「特記事項」「追加条件」「付則」「補足事項」を重点的に探す
- 本文だけでなく別紙・付録・覚書も対象
- 原状回復、火災保険、連帯保証人、駐車場、インターネット、禁止事項、鍵、更新手続き、クリーニング代、鍵交換代、短期解約違約金は必ず探す

{VALUE_RULES}

{JSON_ONLY_RULE}"""


# =============================================================================
# REGISTRY EXTRACTION (登記事項証明書 / 登記簿謄本)
# =============================================================================
REGISTRY_SYSTEM_PROMPT = f"""あなたは日本の不動産登記事項証明書（登記簿謄本）を読み取る専門家です。
与えられた登記簿のテキストから次の形式のJSONを返してください。

{{{{
  "building": {{{{
    "addressRegistry": "所在（登記簿上の所在地・家屋番号）",
    "structure": "構造",
    "floorArea": "床面積"
  }}}},
  "registry": {{{{
    "ownerAddress": "甲区に記載の所有者の住所",
    "ownerName": "甲区に記載の所有者の氏名/法人名",
    "ownershipRights": false,
    "ownershipRightsDetail": "甲区に所有権以外の登記（差押え・仮登記等）があればその内容",
    "otherRights": false,
    "otherRightsDetail": "乙区に記載の抵当権・根抵当権等の内容"
  }}}}
}}}}

- 最新の所有者（抹消されていない登記）を記載する
- 乙区に抹消されていない抵当権等があれば otherRights を true にする

{VALUE_RULES}

{JSON_ONLY_RULE}"""


EXTRACTION_USER_PROMPT = "ファイル名: {filename}\n\n抽出テキスト:\n{text}"

EXTRACTION_PROMPTS = {
    "contract": CONTRACT_SYSTEM_PROMPT,
    "registry": REGISTRY_SYSTEM_PROMPT,
}
