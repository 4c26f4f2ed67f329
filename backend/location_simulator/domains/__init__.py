"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯，按功能領域分為多個子模塊：

- coordinates: 將手動、批次或 GPX 輸入轉換為座標序列
- device: 列舉 iOS 模擬器 / Android 模擬器並設定單一設備的位置
- simulation: 依序將座標廣播到所有設備，以及對應的 HTTP 端點
"""
